"""Indonesian book names and abbreviations."""

from verse_detect.data.types import BookNamePatterns

BOOK_NAMES: BookNamePatterns = {
    "Genesis": ("Kejadian", "Kej"),
    "Exodus": ("Keluaran", "Kel"),
    "Leviticus": ("Imamat", "Im"),
    "Numbers": ("Bilangan", "Bil"),
    "Deuteronomy": ("Ulangan", "Ul"),
    "Joshua": ("Yosua", "Yos"),
    "Judges": ("Hakim-hakim", "Hak"),
    "Ruth": ("Rut",),
    "1 Samuel": ("1 Sam",),
    "2 Samuel": ("2 Sam",),
    "1 Kings": ("1 Raja-raja", "1 Raj"),
    "2 Kings": ("2 Raja-raja", "2 Raj"),
    "1 Chronicles": ("1 Tawarikh", "1 Taw"),
    "2 Chronicles": ("2 Tawarikh", "2 Taw"),
    "Ezra": ("Ezr",),
    "Nehemiah": ("Nehemia", "Neh"),
    "Esther": ("Ester", "Est"),
    "Job": ("Ayub", "Ayb"),
    "Psalms": ("Mazmur", "Mzm"),
    "Proverbs": ("Amsal", "Ams"),
    "Ecclesiastes": ("Pengkhotbah", "Pkh"),
    "Song of Solomon": ("Kidung Agung", "Kid"),
    "Isaiah": ("Yesaya", "Yes"),
    "Jeremiah": ("Yeremia", "Yer"),
    "Lamentations": ("Ratapan", "Rat"),
    "Ezekiel": ("Yehezkiel", "Yeh"),
    "Daniel": ("Dan",),
    "Hosea": ("Hos",),
    "Joel": ("Yoel", "Yl"),
    "Amos": ("Am",),
    "Obadiah": ("Obaja", "Ob"),
    "Jonah": ("Yunus", "Yun"),
    "Micah": ("Mikha", "Mi"),
    "Nahum": ("Nah",),
    "Habakkuk": ("Habakuk", "Hab"),
    "Zephaniah": ("Zefanya", "Zef"),
    "Haggai": ("Hagai", "Hag"),
    "Zechariah": ("Zakharia", "Za"),
    "Malachi": ("Maleakhi", "Mal"),
    "Matthew": ("Matius", "Mat"),
    "Mark": ("Markus", "Mrk"),
    "Luke": ("Lukas", "Luk"),
    "John": ("Yohanes", "Yoh"),
    "Acts": ("Kisah Para Rasul", "Kis"),
    "Romans": ("Roma", "Rm"),
    "1 Corinthians": ("1 Korintus", "1 Kor"),
    "2 Corinthians": ("2 Korintus", "2 Kor"),
    "Galatians": ("Galatia", "Gal"),
    "Ephesians": ("Efesus", "Ef"),
    "Philippians": ("Filipi", "Flp"),
    "Colossians": ("Kolose", "Kol"),
    "1 Thessalonians": ("1 Tesalonika", "1 Tes"),
    "2 Thessalonians": ("2 Tesalonika", "2 Tes"),
    "1 Timothy": ("1 Timotius", "1 Tim"),
    "2 Timothy": ("2 Timotius", "2 Tim"),
    "Titus": ("Tit",),
    "Philemon": ("Filemon", "Flm"),
    "Hebrews": ("Ibrani", "Ibr"),
    "James": ("Yakobus", "Yak"),
    "1 Peter": ("1 Petrus", "1 Ptr"),
    "2 Peter": ("2 Petrus", "2 Ptr"),
    "1 John": ("1 Yohanes", "1 Yoh"),
    "2 John": ("2 Yohanes", "2 Yoh"),
    "3 John": ("3 Yohanes", "3 Yoh"),
    "Jude": ("Yudas", "Yud"),
    "Revelation": ("Wahyu", "Why"),
}
