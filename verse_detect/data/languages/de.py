"""German book names and abbreviations."""

from verse_detect.data.types import BookNamePatterns

BOOK_NAMES: BookNamePatterns = {
    "Genesis": ("1. Mose", "1 Mose", "1Mo", "Genesis", "Gen"),
    "Exodus": ("2. Mose", "2 Mose", "2Mo", "Exodus", "Ex"),
    "Leviticus": ("3. Mose", "3 Mose", "3Mo", "Levitikus", "Lev"),
    "Numbers": ("4. Mose", "4 Mose", "4Mo", "Numeri", "Num"),
    "Deuteronomy": ("5. Mose", "5 Mose", "5Mo", "Deuteronomium", "Dtn"),
    "Joshua": ("Josua", "Jos"),
    "Judges": ("Richter", "Ri"),
    "Ruth": ("Rut", "Ruth", "Rt"),
    "1 Samuel": ("1. Samuel", "1 Samuel", "1 Sam", "1Sam"),
    "2 Samuel": ("2. Samuel", "2 Samuel", "2 Sam", "2Sam"),
    "1 Kings": ("1. Könige", "1 Könige", "1 Kön", "1Kön", "1 Koenige"),
    "2 Kings": ("2. Könige", "2 Könige", "2 Kön", "2Kön", "2 Koenige"),
    "1 Chronicles": ("1. Chronik", "1 Chronik", "1 Chr", "1Chr"),
    "2 Chronicles": ("2. Chronik", "2 Chronik", "2 Chr", "2Chr"),
    "Ezra": ("Esra", "Esr"),
    "Nehemiah": ("Nehemia", "Neh"),
    "Esther": ("Ester", "Esther", "Est"),
    "Job": ("Hiob", "Ijob", "Hi"),
    "Psalms": ("Psalmen", "Psalm", "Ps"),
    "Proverbs": ("Sprüche", "Sprueche", "Spr"),
    "Ecclesiastes": ("Prediger", "Kohelet", "Pred", "Koh"),
    "Song of Solomon": ("Hoheslied", "Hohelied", "Hld"),
    "Isaiah": ("Jesaja", "Jes"),
    "Jeremiah": ("Jeremia", "Jer"),
    "Lamentations": ("Klagelieder", "Klgl"),
    "Ezekiel": ("Hesekiel", "Ezechiel", "Hes", "Ez"),
    "Daniel": ("Daniel", "Dan", "Dn"),
    "Hosea": ("Hosea", "Hos"),
    "Joel": ("Joel", "Joël"),
    "Amos": ("Amos", "Am"),
    "Obadiah": ("Obadja", "Obd"),
    "Jonah": ("Jona", "Jon"),
    "Micah": ("Micha", "Mi"),
    "Nahum": ("Nahum", "Nah"),
    "Habakkuk": ("Habakuk", "Hab"),
    "Zephaniah": ("Zefanja", "Zephanja", "Zef"),
    "Haggai": ("Haggai", "Hag"),
    "Zechariah": ("Sacharja", "Sach"),
    "Malachi": ("Maleachi", "Mal"),
    "Matthew": ("Matthäus", "Matthaeus", "Mt"),
    "Mark": ("Markus", "Mk"),
    "Luke": ("Lukas", "Lk"),
    "John": ("Johannes", "Joh"),
    "Acts": ("Apostelgeschichte", "Apg"),
    "Romans": ("Römer", "Roemer", "Röm"),
    "1 Corinthians": ("1. Korinther", "1 Korinther", "1 Kor", "1Kor"),
    "2 Corinthians": ("2. Korinther", "2 Korinther", "2 Kor", "2Kor"),
    "Galatians": ("Galater", "Gal"),
    "Ephesians": ("Epheser", "Eph"),
    "Philippians": ("Philipper", "Phil"),
    "Colossians": ("Kolosser", "Kol"),
    "1 Thessalonians": ("1. Thessalonicher", "1 Thessalonicher", "1 Thess", "1Thess"),
    "2 Thessalonians": ("2. Thessalonicher", "2 Thessalonicher", "2 Thess", "2Thess"),
    "1 Timothy": ("1. Timotheus", "1 Timotheus", "1 Tim", "1Tim"),
    "2 Timothy": ("2. Timotheus", "2 Timotheus", "2 Tim", "2Tim"),
    "Titus": ("Titus", "Tit"),
    "Philemon": ("Philemon", "Phlm"),
    "Hebrews": ("Hebräer", "Hebraeer", "Hebr"),
    "James": ("Jakobus", "Jak"),
    "1 Peter": ("1. Petrus", "1 Petrus", "1 Petr", "1Petr"),
    "2 Peter": ("2. Petrus", "2 Petrus", "2 Petr", "2Petr"),
    "1 John": ("1. Johannes", "1 Johannes", "1 Joh", "1Joh"),
    "2 John": ("2. Johannes", "2 Johannes", "2 Joh", "2Joh"),
    "3 John": ("3. Johannes", "3 Johannes", "3 Joh", "3Joh"),
    "Jude": ("Judas", "Jud"),
    "Revelation": ("Offenbarung", "Offb"),
}
