"""Portuguese book names and abbreviations."""

from verse_detect.data.types import BookNamePatterns

BOOK_NAMES: BookNamePatterns = {
    "Genesis": ("Gênesis", "Genesis", "Gên", "Gn"),
    "Exodus": ("Êxodo", "Exodo", "Êx", "Ex"),
    "Leviticus": ("Levítico", "Levitico", "Lv"),
    "Numbers": ("Números", "Numeros", "Nm"),
    "Deuteronomy": ("Deuteronômio", "Deuteronomio", "Dt"),
    "Joshua": ("Josué", "Josue", "Js"),
    "Judges": ("Juízes", "Juizes", "Jz"),
    "Ruth": ("Rute", "Rt"),
    "1 Samuel": ("1 Samuel", "1 Sm", "1Sm"),
    "2 Samuel": ("2 Samuel", "2 Sm", "2Sm"),
    "1 Kings": ("1 Reis", "1 Rs", "1Rs"),
    "2 Kings": ("2 Reis", "2 Rs", "2Rs"),
    "1 Chronicles": ("1 Crônicas", "1 Cronicas", "1 Cr", "1Cr"),
    "2 Chronicles": ("2 Crônicas", "2 Cronicas", "2 Cr", "2Cr"),
    "Ezra": ("Esdras", "Ed"),
    "Nehemiah": ("Neemias", "Ne"),
    "Esther": ("Ester", "Et"),
    "Job": ("Jó",),
    "Psalms": ("Salmos", "Salmo", "Sl"),
    "Proverbs": ("Provérbios", "Proverbios", "Pv"),
    "Ecclesiastes": ("Eclesiastes", "Ec"),
    "Song of Solomon": ("Cânticos", "Canticos", "Cântico dos Cânticos", "Ct"),
    "Isaiah": ("Isaías", "Isaias", "Is"),
    "Jeremiah": ("Jeremias", "Jr"),
    "Lamentations": ("Lamentações", "Lamentacoes", "Lm"),
    "Ezekiel": ("Ezequiel", "Ez"),
    "Daniel": ("Daniel", "Dn"),
    "Hosea": ("Oséias", "Oseias", "Os"),
    "Joel": ("Joel", "Jl"),
    "Amos": ("Amós", "Amos", "Am"),
    "Obadiah": ("Obadias", "Ob"),
    "Jonah": ("Jonas", "Jn"),
    "Micah": ("Miquéias", "Miqueias", "Mq"),
    "Nahum": ("Naum", "Na"),
    "Habakkuk": ("Habacuque", "Hc"),
    "Zephaniah": ("Sofonias", "Sf"),
    "Haggai": ("Ageu", "Ag"),
    "Zechariah": ("Zacarias", "Zc"),
    "Malachi": ("Malaquias", "Ml"),
    "Matthew": ("Mateus", "Mt"),
    "Mark": ("Marcos", "Mc"),
    "Luke": ("Lucas", "Lc"),
    "John": ("João", "Joao", "Jo"),
    "Acts": ("Atos", "At"),
    "Romans": ("Romanos", "Rm"),
    "1 Corinthians": ("1 Coríntios", "1 Corintios", "1 Co", "1Co"),
    "2 Corinthians": ("2 Coríntios", "2 Corintios", "2 Co", "2Co"),
    "Galatians": ("Gálatas", "Galatas", "Gl"),
    "Ephesians": ("Efésios", "Efesios", "Ef"),
    "Philippians": ("Filipenses", "Fp"),
    "Colossians": ("Colossenses", "Cl"),
    "1 Thessalonians": ("1 Tessalonicenses", "1 Ts", "1Ts"),
    "2 Thessalonians": ("2 Tessalonicenses", "2 Ts", "2Ts"),
    "1 Timothy": ("1 Timóteo", "1 Timoteo", "1 Tm", "1Tm"),
    "2 Timothy": ("2 Timóteo", "2 Timoteo", "2 Tm", "2Tm"),
    "Titus": ("Tito", "Tt"),
    "Philemon": ("Filemom", "Fm"),
    "Hebrews": ("Hebreus", "Hb"),
    "James": ("Tiago", "Tg"),
    "1 Peter": ("1 Pedro", "1 Pe", "1Pe"),
    "2 Peter": ("2 Pedro", "2 Pe", "2Pe"),
    "1 John": ("1 João", "1 Joao", "1 Jo", "1Jo"),
    "2 John": ("2 João", "2 Joao", "2 Jo", "2Jo"),
    "3 John": ("3 João", "3 Joao", "3 Jo", "3Jo"),
    "Jude": ("Judas", "Jd"),
    "Revelation": ("Apocalipse", "Ap"),
}
