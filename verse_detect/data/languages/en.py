"""English book names and abbreviations."""

from verse_detect.data.types import BookNamePatterns

BOOK_NAMES: BookNamePatterns = {
    "Genesis": ("Genesis", "Gen", "Ge", "Gn"),
    "Exodus": ("Exodus", "Exod", "Exo", "Ex"),
    "Leviticus": ("Leviticus", "Lev", "Lv"),
    "Numbers": ("Numbers", "Num", "Nu", "Nm"),
    "Deuteronomy": ("Deuteronomy", "Deut", "Deu", "Dt"),
    "Joshua": ("Joshua", "Josh", "Jos"),
    "Judges": ("Judges", "Judg", "Jdg"),
    "Ruth": ("Ruth", "Rth", "Ru"),
    "1 Samuel": ("1 Samuel", "1Samuel", "1 Sam", "1Sam", "1 Sa", "I Samuel"),
    "2 Samuel": ("2 Samuel", "2Samuel", "2 Sam", "2Sam", "2 Sa", "II Samuel"),
    "1 Kings": ("1 Kings", "1Kings", "1 Kgs", "1Kgs", "1 Ki", "I Kings"),
    "2 Kings": ("2 Kings", "2Kings", "2 Kgs", "2Kgs", "2 Ki", "II Kings"),
    "1 Chronicles": ("1 Chronicles", "1Chronicles", "1 Chron", "1 Chr", "1Chr", "I Chronicles"),
    "2 Chronicles": ("2 Chronicles", "2Chronicles", "2 Chron", "2 Chr", "2Chr", "II Chronicles"),
    "Ezra": ("Ezra", "Ezr"),
    "Nehemiah": ("Nehemiah", "Neh", "Ne"),
    "Esther": ("Esther", "Esth", "Est"),
    "Job": ("Job", "Jb"),
    "Psalms": ("Psalms", "Psalm", "Psa", "Pss", "Ps"),
    "Proverbs": ("Proverbs", "Prov", "Pro", "Prv"),
    "Ecclesiastes": ("Ecclesiastes", "Eccles", "Eccl", "Ecc", "Qoheleth"),
    "Song of Solomon": ("Song of Solomon", "Song of Songs", "Song", "Canticles", "SoS"),
    "Isaiah": ("Isaiah", "Isa"),
    "Jeremiah": ("Jeremiah", "Jer", "Jr"),
    "Lamentations": ("Lamentations", "Lam", "La"),
    "Ezekiel": ("Ezekiel", "Ezek", "Eze", "Ezk"),
    "Daniel": ("Daniel", "Dan", "Dn"),
    "Hosea": ("Hosea", "Hos", "Ho"),
    "Joel": ("Joel", "Jl"),
    "Amos": ("Amos",),
    "Obadiah": ("Obadiah", "Obad", "Ob"),
    "Jonah": ("Jonah", "Jon", "Jnh"),
    "Micah": ("Micah", "Mic", "Mc"),
    "Nahum": ("Nahum", "Nah", "Na"),
    "Habakkuk": ("Habakkuk", "Hab", "Hb"),
    "Zephaniah": ("Zephaniah", "Zeph", "Zep", "Zp"),
    "Haggai": ("Haggai", "Hag", "Hg"),
    "Zechariah": ("Zechariah", "Zech", "Zec", "Zc"),
    "Malachi": ("Malachi", "Mal", "Ml"),
    "Matthew": ("Matthew", "Matt", "Mat", "Mt"),
    "Mark": ("Mark", "Mrk", "Mk", "Mr"),
    "Luke": ("Luke", "Luk", "Lk"),
    "John": ("John", "Jhn", "Jn"),
    "Acts": ("Acts", "Act", "Ac"),
    "Romans": ("Romans", "Rom", "Ro", "Rm"),
    "1 Corinthians": ("1 Corinthians", "1Corinthians", "1 Cor", "1Cor", "1 Co", "I Corinthians"),
    "2 Corinthians": ("2 Corinthians", "2Corinthians", "2 Cor", "2Cor", "2 Co", "II Corinthians"),
    "Galatians": ("Galatians", "Gal", "Ga"),
    "Ephesians": ("Ephesians", "Eph", "Ephes"),
    "Philippians": ("Philippians", "Phil", "Php", "Pp"),
    "Colossians": ("Colossians", "Col", "Co"),
    "1 Thessalonians": ("1 Thessalonians", "1Thessalonians", "1 Thess", "1Thess", "1 Th", "I Thessalonians"),
    "2 Thessalonians": ("2 Thessalonians", "2Thessalonians", "2 Thess", "2Thess", "2 Th", "II Thessalonians"),
    "1 Timothy": ("1 Timothy", "1Timothy", "1 Tim", "1Tim", "1 Ti", "I Timothy"),
    "2 Timothy": ("2 Timothy", "2Timothy", "2 Tim", "2Tim", "2 Ti", "II Timothy"),
    "Titus": ("Titus", "Tit", "Ti"),
    "Philemon": ("Philemon", "Philem", "Phm", "Pm"),
    "Hebrews": ("Hebrews", "Heb"),
    "James": ("James", "Jas", "Jm"),
    "1 Peter": ("1 Peter", "1Peter", "1 Pet", "1Pet", "1 Pe", "I Peter"),
    "2 Peter": ("2 Peter", "2Peter", "2 Pet", "2Pet", "2 Pe", "II Peter"),
    "1 John": ("1 John", "1John", "1 Jn", "1Jn", "1 Jhn", "I John"),
    "2 John": ("2 John", "2John", "2 Jn", "2Jn", "2 Jhn", "II John"),
    "3 John": ("3 John", "3John", "3 Jn", "3Jn", "3 Jhn", "III John"),
    "Jude": ("Jude", "Jud", "Jd"),
    "Revelation": ("Revelation", "Revelations", "Rev", "Re", "Apocalypse"),
}
