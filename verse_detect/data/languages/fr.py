"""French book names and abbreviations."""

from verse_detect.data.types import BookNamePatterns

BOOK_NAMES: BookNamePatterns = {
    "Genesis": ("Genèse", "Genese", "Gen", "Gn"),
    "Exodus": ("Exode", "Ex"),
    "Leviticus": ("Lévitique", "Levitique", "Lév", "Lv"),
    "Numbers": ("Nombres", "Nomb", "Nb"),
    "Deuteronomy": ("Deutéronome", "Deuteronome", "Deut", "Dt"),
    "Joshua": ("Josué", "Josue", "Jos"),
    "Judges": ("Juges", "Jg"),
    "Ruth": ("Ruth", "Rt"),
    "1 Samuel": ("1 Samuel", "1 Sam", "1 S", "1S"),
    "2 Samuel": ("2 Samuel", "2 Sam", "2 S", "2S"),
    "1 Kings": ("1 Rois", "1 R", "1R"),
    "2 Kings": ("2 Rois", "2 R", "2R"),
    "1 Chronicles": ("1 Chroniques", "1 Chron", "1 Ch", "1Ch"),
    "2 Chronicles": ("2 Chroniques", "2 Chron", "2 Ch", "2Ch"),
    "Ezra": ("Esdras", "Esd"),
    "Nehemiah": ("Néhémie", "Nehemie", "Né", "Ne"),
    "Esther": ("Esther", "Est"),
    "Job": ("Job", "Jb"),
    "Psalms": ("Psaumes", "Psaume", "Ps"),
    "Proverbs": ("Proverbes", "Prov", "Pr"),
    "Ecclesiastes": ("Ecclésiaste", "Ecclesiaste", "Eccl", "Qo"),
    "Song of Solomon": ("Cantique des Cantiques", "Cantique", "Ct"),
    "Isaiah": ("Ésaïe", "Esaie", "Isaïe", "Isaie", "Es"),
    "Jeremiah": ("Jérémie", "Jeremie", "Jér", "Jr"),
    "Lamentations": ("Lamentations", "Lam", "Lm"),
    "Ezekiel": ("Ézéchiel", "Ezechiel", "Éz", "Ez"),
    "Daniel": ("Daniel", "Dan", "Dn"),
    "Hosea": ("Osée", "Osee", "Os"),
    "Joel": ("Joël", "Joel", "Jl"),
    "Amos": ("Amos", "Am"),
    "Obadiah": ("Abdias", "Ab"),
    "Jonah": ("Jonas", "Jon"),
    "Micah": ("Michée", "Michee", "Mi"),
    "Nahum": ("Nahoum", "Nahum", "Na"),
    "Habakkuk": ("Habacuc", "Ha"),
    "Zephaniah": ("Sophonie", "So"),
    "Haggai": ("Aggée", "Aggee", "Ag"),
    "Zechariah": ("Zacharie", "Za"),
    "Malachi": ("Malachie", "Mal"),
    "Matthew": ("Matthieu", "Matt", "Mt"),
    "Mark": ("Marc", "Mc"),
    "Luke": ("Luc", "Lc"),
    "John": ("Jean", "Jn"),
    "Acts": ("Actes", "Ac"),
    "Romans": ("Romains", "Rom", "Rm"),
    "1 Corinthians": ("1 Corinthiens", "1 Cor", "1 Co", "1Co"),
    "2 Corinthians": ("2 Corinthiens", "2 Cor", "2 Co", "2Co"),
    "Galatians": ("Galates", "Gal", "Ga"),
    "Ephesians": ("Éphésiens", "Ephesiens", "Éph", "Ep"),
    "Philippians": ("Philippiens", "Phil", "Ph"),
    "Colossians": ("Colossiens", "Col"),
    "1 Thessalonians": ("1 Thessaloniciens", "1 Thess", "1 Th", "1Th"),
    "2 Thessalonians": ("2 Thessaloniciens", "2 Thess", "2 Th", "2Th"),
    "1 Timothy": ("1 Timothée", "1 Timothee", "1 Tim", "1 Tm", "1Tm"),
    "2 Timothy": ("2 Timothée", "2 Timothee", "2 Tim", "2 Tm", "2Tm"),
    "Titus": ("Tite", "Tt"),
    "Philemon": ("Philémon", "Philemon", "Phm"),
    "Hebrews": ("Hébreux", "Hebreux", "Héb", "He"),
    "James": ("Jacques", "Jc"),
    "1 Peter": ("1 Pierre", "1 Pi", "1 P", "1P"),
    "2 Peter": ("2 Pierre", "2 Pi", "2 P", "2P"),
    "1 John": ("1 Jean", "1 Jn", "1Jn"),
    "2 John": ("2 Jean", "2 Jn", "2Jn"),
    "3 John": ("3 Jean", "3 Jn", "3Jn"),
    "Jude": ("Jude", "Jud"),
    "Revelation": ("Apocalypse", "Apoc", "Ap"),
}
