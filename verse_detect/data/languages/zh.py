"""Chinese (Simplified) book names and the Union Version short forms."""

from verse_detect.data.types import BookNamePatterns

BOOK_NAMES: BookNamePatterns = {
    "Genesis": ("创世记", "创"),
    "Exodus": ("出埃及记", "出"),
    "Leviticus": ("利未记", "利"),
    "Numbers": ("民数记", "民"),
    "Deuteronomy": ("申命记", "申"),
    "Joshua": ("约书亚记", "书"),
    "Judges": ("士师记", "士"),
    "Ruth": ("路得记", "得"),
    "1 Samuel": ("撒母耳记上", "撒上"),
    "2 Samuel": ("撒母耳记下", "撒下"),
    "1 Kings": ("列王纪上", "王上"),
    "2 Kings": ("列王纪下", "王下"),
    "1 Chronicles": ("历代志上", "代上"),
    "2 Chronicles": ("历代志下", "代下"),
    "Ezra": ("以斯拉记", "拉"),
    "Nehemiah": ("尼希米记", "尼"),
    "Esther": ("以斯帖记", "斯"),
    "Job": ("约伯记", "伯"),
    "Psalms": ("诗篇", "诗"),
    "Proverbs": ("箴言", "箴"),
    "Ecclesiastes": ("传道书", "传"),
    "Song of Solomon": ("雅歌", "歌"),
    "Isaiah": ("以赛亚书", "赛"),
    "Jeremiah": ("耶利米书", "耶"),
    "Lamentations": ("耶利米哀歌", "哀"),
    "Ezekiel": ("以西结书", "结"),
    "Daniel": ("但以理书", "但"),
    "Hosea": ("何西阿书", "何"),
    "Joel": ("约珥书", "珥"),
    "Amos": ("阿摩司书", "摩"),
    "Obadiah": ("俄巴底亚书", "俄"),
    "Jonah": ("约拿书", "拿"),
    "Micah": ("弥迦书", "弥"),
    "Nahum": ("那鸿书", "鸿"),
    "Habakkuk": ("哈巴谷书", "哈"),
    "Zephaniah": ("西番雅书", "番"),
    "Haggai": ("哈该书", "该"),
    "Zechariah": ("撒迦利亚书", "亚"),
    "Malachi": ("玛拉基书", "玛"),
    "Matthew": ("马太福音", "太"),
    "Mark": ("马可福音", "可"),
    "Luke": ("路加福音", "路"),
    "John": ("约翰福音", "约"),
    "Acts": ("使徒行传", "徒"),
    "Romans": ("罗马书", "罗"),
    "1 Corinthians": ("哥林多前书", "林前"),
    "2 Corinthians": ("哥林多后书", "林后"),
    "Galatians": ("加拉太书", "加"),
    "Ephesians": ("以弗所书", "弗"),
    "Philippians": ("腓立比书", "腓"),
    "Colossians": ("歌罗西书", "西"),
    "1 Thessalonians": ("帖撒罗尼迦前书", "帖前"),
    "2 Thessalonians": ("帖撒罗尼迦后书", "帖后"),
    "1 Timothy": ("提摩太前书", "提前"),
    "2 Timothy": ("提摩太后书", "提后"),
    "Titus": ("提多书", "多"),
    "Philemon": ("腓利门书", "门"),
    "Hebrews": ("希伯来书", "来"),
    "James": ("雅各书", "雅"),
    "1 Peter": ("彼得前书", "彼前"),
    "2 Peter": ("彼得后书", "彼后"),
    "1 John": ("约翰一书", "约一"),
    "2 John": ("约翰二书", "约二"),
    "3 John": ("约翰三书", "约三"),
    "Jude": ("犹大书", "犹"),
    "Revelation": ("启示录", "启"),
}
