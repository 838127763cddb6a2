"""Spanish book names and abbreviations."""

from verse_detect.data.types import BookNamePatterns

BOOK_NAMES: BookNamePatterns = {
    "Genesis": ("Génesis", "Genesis", "Gén", "Gn"),
    "Exodus": ("Éxodo", "Exodo", "Éx", "Ex"),
    "Leviticus": ("Levítico", "Levitico", "Lv"),
    "Numbers": ("Números", "Numeros", "Nm"),
    "Deuteronomy": ("Deuteronomio", "Dt"),
    "Joshua": ("Josué", "Josue", "Jos"),
    "Judges": ("Jueces", "Jue", "Jc"),
    "Ruth": ("Rut", "Rt"),
    "1 Samuel": ("1 Samuel", "1 Sam", "1 S", "1S"),
    "2 Samuel": ("2 Samuel", "2 Sam", "2 S", "2S"),
    "1 Kings": ("1 Reyes", "1 Re", "1 R", "1R"),
    "2 Kings": ("2 Reyes", "2 Re", "2 R", "2R"),
    "1 Chronicles": ("1 Crónicas", "1 Cronicas", "1 Cr", "1Cr"),
    "2 Chronicles": ("2 Crónicas", "2 Cronicas", "2 Cr", "2Cr"),
    "Ezra": ("Esdras", "Esd"),
    "Nehemiah": ("Nehemías", "Nehemias", "Neh", "Ne"),
    "Esther": ("Ester", "Est"),
    "Job": ("Job",),
    "Psalms": ("Salmos", "Salmo", "Sal", "Sl"),
    "Proverbs": ("Proverbios", "Prov", "Pr"),
    "Ecclesiastes": ("Eclesiastés", "Eclesiastes", "Ecl", "Ec"),
    "Song of Solomon": ("Cantares", "Cantar de los Cantares", "Cant", "Cnt"),
    "Isaiah": ("Isaías", "Isaias", "Is"),
    "Jeremiah": ("Jeremías", "Jeremias", "Jer", "Jr"),
    "Lamentations": ("Lamentaciones", "Lam", "Lm"),
    "Ezekiel": ("Ezequiel", "Ez"),
    "Daniel": ("Daniel", "Dn"),
    "Hosea": ("Oseas", "Os"),
    "Joel": ("Joel", "Jl"),
    "Amos": ("Amós", "Amos", "Am"),
    "Obadiah": ("Abdías", "Abdias", "Abd"),
    "Jonah": ("Jonás", "Jonas", "Jon"),
    "Micah": ("Miqueas", "Miq"),
    "Nahum": ("Nahúm", "Nahum", "Nah"),
    "Habakkuk": ("Habacuc", "Hab"),
    "Zephaniah": ("Sofonías", "Sofonias", "Sof"),
    "Haggai": ("Hageo", "Hag"),
    "Zechariah": ("Zacarías", "Zacarias", "Zac"),
    "Malachi": ("Malaquías", "Malaquias", "Mal"),
    "Matthew": ("Mateo", "Mat", "Mt"),
    "Mark": ("Marcos", "Mar", "Mc"),
    "Luke": ("Lucas", "Luc", "Lc"),
    "John": ("Juan", "Jn"),
    "Acts": ("Hechos", "Hch"),
    "Romans": ("Romanos", "Rom", "Ro"),
    "1 Corinthians": ("1 Corintios", "1 Cor", "1 Co", "1Co"),
    "2 Corinthians": ("2 Corintios", "2 Cor", "2 Co", "2Co"),
    "Galatians": ("Gálatas", "Galatas", "Gál", "Gá"),
    "Ephesians": ("Efesios", "Ef"),
    "Philippians": ("Filipenses", "Flp", "Fil"),
    "Colossians": ("Colosenses", "Col"),
    "1 Thessalonians": ("1 Tesalonicenses", "1 Tes", "1 Ts", "1Ts"),
    "2 Thessalonians": ("2 Tesalonicenses", "2 Tes", "2 Ts", "2Ts"),
    "1 Timothy": ("1 Timoteo", "1 Tim", "1 Ti", "1Ti"),
    "2 Timothy": ("2 Timoteo", "2 Tim", "2 Ti", "2Ti"),
    "Titus": ("Tito", "Tit"),
    "Philemon": ("Filemón", "Filemon", "Flm"),
    "Hebrews": ("Hebreos", "Heb"),
    "James": ("Santiago", "Stg", "Sant"),
    "1 Peter": ("1 Pedro", "1 Pe", "1 P", "1P"),
    "2 Peter": ("2 Pedro", "2 Pe", "2 P", "2P"),
    "1 John": ("1 Juan", "1 Jn", "1Jn"),
    "2 John": ("2 Juan", "2 Jn", "2Jn"),
    "3 John": ("3 Juan", "3 Jn", "3Jn"),
    "Jude": ("Judas", "Jud", "Jds"),
    "Revelation": ("Apocalipsis", "Ap", "Apoc"),
}
