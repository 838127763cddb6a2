"""Arabic book names (Van Dyck tradition)."""

from verse_detect.data.types import BookNamePatterns

BOOK_NAMES: BookNamePatterns = {
    "Genesis": ("التكوين", "تكوين", "تك"),
    "Exodus": ("الخروج", "خروج", "خر"),
    "Leviticus": ("اللاويين", "لاويين", "لا"),
    "Numbers": ("العدد", "عدد", "عد"),
    "Deuteronomy": ("التثنية", "تثنية", "تث"),
    "Joshua": ("يشوع", "يش"),
    "Judges": ("القضاة", "قضاة", "قض"),
    "Ruth": ("راعوث", "را"),
    "1 Samuel": ("1 صموئيل", "1صم", "1 صم"),
    "2 Samuel": ("2 صموئيل", "2صم", "2 صم"),
    "1 Kings": ("1 الملوك", "1 ملوك", "1مل", "1 مل"),
    "2 Kings": ("2 الملوك", "2 ملوك", "2مل", "2 مل"),
    "1 Chronicles": ("1 أخبار الأيام", "1 أخبار", "1أخ", "1 أخ"),
    "2 Chronicles": ("2 أخبار الأيام", "2 أخبار", "2أخ", "2 أخ"),
    "Ezra": ("عزرا", "عز"),
    "Nehemiah": ("نحميا", "نح"),
    "Esther": ("أستير", "أس"),
    "Job": ("أيوب", "أي"),
    "Psalms": ("المزامير", "مزامير", "مزمور", "مز"),
    "Proverbs": ("الأمثال", "أمثال", "أم"),
    "Ecclesiastes": ("الجامعة", "جامعة", "جا"),
    "Song of Solomon": ("نشيد الأنشاد", "نشيد", "نش"),
    "Isaiah": ("إشعياء", "اشعياء", "إش"),
    "Jeremiah": ("إرميا", "ارميا", "إر"),
    "Lamentations": ("مراثي إرميا", "مراثي", "مرا"),
    "Ezekiel": ("حزقيال", "حز"),
    "Daniel": ("دانيال", "دا"),
    "Hosea": ("هوشع", "هو"),
    "Joel": ("يوئيل", "يوء"),
    "Amos": ("عاموس", "عا"),
    "Obadiah": ("عوبديا", "عو"),
    "Jonah": ("يونان", "يون"),
    "Micah": ("ميخا", "مي"),
    "Nahum": ("ناحوم", "نا"),
    "Habakkuk": ("حبقوق", "حب"),
    "Zephaniah": ("صفنيا", "صف"),
    "Haggai": ("حجي", "حج"),
    "Zechariah": ("زكريا", "زك"),
    "Malachi": ("ملاخي", "ملا"),
    "Matthew": ("متى", "مت"),
    "Mark": ("مرقس", "مر"),
    "Luke": ("لوقا", "لو"),
    "John": ("يوحنا", "يو"),
    "Acts": ("أعمال الرسل", "أعمال", "أع"),
    "Romans": ("رومية", "رو"),
    "1 Corinthians": ("1 كورنثوس", "1كو", "1 كو"),
    "2 Corinthians": ("2 كورنثوس", "2كو", "2 كو"),
    "Galatians": ("غلاطية", "غل"),
    "Ephesians": ("أفسس", "أف"),
    "Philippians": ("فيلبي", "في"),
    "Colossians": ("كولوسي", "كو"),
    "1 Thessalonians": ("1 تسالونيكي", "1تس", "1 تس"),
    "2 Thessalonians": ("2 تسالونيكي", "2تس", "2 تس"),
    "1 Timothy": ("1 تيموثاوس", "1تي", "1 تي"),
    "2 Timothy": ("2 تيموثاوس", "2تي", "2 تي"),
    "Titus": ("تيطس", "تي"),
    "Philemon": ("فليمون", "فل"),
    "Hebrews": ("العبرانيين", "عبرانيين", "عب"),
    "James": ("يعقوب", "يع"),
    "1 Peter": ("1 بطرس", "1بط", "1 بط"),
    "2 Peter": ("2 بطرس", "2بط", "2 بط"),
    "1 John": ("1 يوحنا", "1يو", "1 يو"),
    "2 John": ("2 يوحنا", "2يو", "2 يو"),
    "3 John": ("3 يوحنا", "3يو", "3 يو"),
    "Jude": ("يهوذا", "يه"),
    "Revelation": ("رؤيا يوحنا", "رؤيا", "رؤ"),
}
