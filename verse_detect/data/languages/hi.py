"""Hindi book names."""

from verse_detect.data.types import BookNamePatterns

BOOK_NAMES: BookNamePatterns = {
    "Genesis": ("उत्पत्ति", "उत्प"),
    "Exodus": ("निर्गमन", "निर्ग"),
    "Leviticus": ("लैव्यव्यवस्था", "लैव्य"),
    "Numbers": ("गिनती", "गिन"),
    "Deuteronomy": ("व्यवस्थाविवरण", "व्यव"),
    "Joshua": ("यहोशू", "यहो"),
    "Judges": ("न्यायियों", "न्यायी"),
    "Ruth": ("रूत",),
    "1 Samuel": ("1 शमूएल", "1 शमू"),
    "2 Samuel": ("2 शमूएल", "2 शमू"),
    "1 Kings": ("1 राजा",),
    "2 Kings": ("2 राजा",),
    "1 Chronicles": ("1 इतिहास", "1 इति"),
    "2 Chronicles": ("2 इतिहास", "2 इति"),
    "Ezra": ("एज्रा",),
    "Nehemiah": ("नहेम्याह", "नहे"),
    "Esther": ("एस्तेर",),
    "Job": ("अय्यूब",),
    "Psalms": ("भजन संहिता", "भजन"),
    "Proverbs": ("नीतिवचन", "नीति"),
    "Ecclesiastes": ("सभोपदेशक", "सभो"),
    "Song of Solomon": ("श्रेष्ठगीत", "श्रेष्ठ"),
    "Isaiah": ("यशायाह", "यशा"),
    "Jeremiah": ("यिर्मयाह", "यिर्म"),
    "Lamentations": ("विलापगीत", "विलाप"),
    "Ezekiel": ("यहेजकेल", "यहेज"),
    "Daniel": ("दानिय्येल", "दानि"),
    "Hosea": ("होशे",),
    "Joel": ("योएल",),
    "Amos": ("आमोस",),
    "Obadiah": ("ओबद्याह", "ओब"),
    "Jonah": ("योना",),
    "Micah": ("मीका",),
    "Nahum": ("नहूम",),
    "Habakkuk": ("हबक्कूक", "हब"),
    "Zephaniah": ("सपन्याह", "सप"),
    "Haggai": ("हाग्गै",),
    "Zechariah": ("जकर्याह", "जक"),
    "Malachi": ("मलाकी",),
    "Matthew": ("मत्ती",),
    "Mark": ("मरकुस", "मर"),
    "Luke": ("लूका",),
    "John": ("यूहन्ना", "यूह"),
    "Acts": ("प्रेरितों के काम", "प्रेरितों", "प्रेरि"),
    "Romans": ("रोमियों", "रोमि"),
    "1 Corinthians": ("1 कुरिन्थियों", "1 कुरि"),
    "2 Corinthians": ("2 कुरिन्थियों", "2 कुरि"),
    "Galatians": ("गलातियों", "गला"),
    "Ephesians": ("इफिसियों", "इफि"),
    "Philippians": ("फिलिप्पियों", "फिलि"),
    "Colossians": ("कुलुस्सियों", "कुलु"),
    "1 Thessalonians": ("1 थिस्सलुनीकियों", "1 थिस्स"),
    "2 Thessalonians": ("2 थिस्सलुनीकियों", "2 थिस्स"),
    "1 Timothy": ("1 तीमुथियुस", "1 तीमु"),
    "2 Timothy": ("2 तीमुथियुस", "2 तीमु"),
    "Titus": ("तीतुस",),
    "Philemon": ("फिलेमोन", "फिले"),
    "Hebrews": ("इब्रानियों", "इब्रा"),
    "James": ("याकूब",),
    "1 Peter": ("1 पतरस", "1 पत"),
    "2 Peter": ("2 पतरस", "2 पत"),
    "1 John": ("1 यूहन्ना", "1 यूह"),
    "2 John": ("2 यूहन्ना", "2 यूह"),
    "3 John": ("3 यूहन्ना", "3 यूह"),
    "Jude": ("यहूदा",),
    "Revelation": ("प्रकाशितवाक्य", "प्रका"),
}
