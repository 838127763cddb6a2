"""Russian book names and abbreviations (Synodal tradition)."""

from verse_detect.data.types import BookNamePatterns

BOOK_NAMES: BookNamePatterns = {
    "Genesis": ("Бытие", "Быт"),
    "Exodus": ("Исход", "Исх"),
    "Leviticus": ("Левит", "Лев"),
    "Numbers": ("Числа", "Чис"),
    "Deuteronomy": ("Второзаконие", "Втор"),
    "Joshua": ("Иисус Навин", "Нав"),
    "Judges": ("Судьи", "Суд"),
    "Ruth": ("Руфь", "Руф"),
    "1 Samuel": ("1 Царств", "1 Цар", "1Цар"),
    "2 Samuel": ("2 Царств", "2 Цар", "2Цар"),
    "1 Kings": ("3 Царств", "3 Цар", "3Цар"),
    "2 Kings": ("4 Царств", "4 Цар", "4Цар"),
    "1 Chronicles": ("1 Паралипоменон", "1 Пар", "1Пар"),
    "2 Chronicles": ("2 Паралипоменон", "2 Пар", "2Пар"),
    "Ezra": ("Ездра", "Езд"),
    "Nehemiah": ("Неемия", "Неем"),
    "Esther": ("Есфирь", "Есф"),
    "Job": ("Иов",),
    "Psalms": ("Псалтирь", "Псалом", "Пс"),
    "Proverbs": ("Притчи", "Притч", "Прит"),
    "Ecclesiastes": ("Екклесиаст", "Еккл"),
    "Song of Solomon": ("Песнь Песней", "Песн"),
    "Isaiah": ("Исаия", "Ис"),
    "Jeremiah": ("Иеремия", "Иер"),
    "Lamentations": ("Плач Иеремии", "Плач"),
    "Ezekiel": ("Иезекииль", "Иез"),
    "Daniel": ("Даниил", "Дан"),
    "Hosea": ("Осия", "Ос"),
    "Joel": ("Иоиль", "Иоил"),
    "Amos": ("Амос", "Ам"),
    "Obadiah": ("Авдий", "Авд"),
    "Jonah": ("Иона", "Ион"),
    "Micah": ("Михей", "Мих"),
    "Nahum": ("Наум",),
    "Habakkuk": ("Аввакум", "Авв"),
    "Zephaniah": ("Софония", "Соф"),
    "Haggai": ("Аггей", "Агг"),
    "Zechariah": ("Захария", "Зах"),
    "Malachi": ("Малахия", "Мал"),
    "Matthew": ("Матфея", "Матфей", "Мф"),
    "Mark": ("Марка", "Марк", "Мк"),
    "Luke": ("Луки", "Лука", "Лк"),
    "John": ("Иоанна", "Иоанн", "Ин"),
    "Acts": ("Деяния", "Деян"),
    "Romans": ("Римлянам", "Рим"),
    "1 Corinthians": ("1 Коринфянам", "1 Кор", "1Кор"),
    "2 Corinthians": ("2 Коринфянам", "2 Кор", "2Кор"),
    "Galatians": ("Галатам", "Гал"),
    "Ephesians": ("Ефесянам", "Еф"),
    "Philippians": ("Филиппийцам", "Флп"),
    "Colossians": ("Колоссянам", "Кол"),
    "1 Thessalonians": ("1 Фессалоникийцам", "1 Фес", "1Фес"),
    "2 Thessalonians": ("2 Фессалоникийцам", "2 Фес", "2Фес"),
    "1 Timothy": ("1 Тимофею", "1 Тим", "1Тим"),
    "2 Timothy": ("2 Тимофею", "2 Тим", "2Тим"),
    "Titus": ("Титу", "Тит"),
    "Philemon": ("Филимону", "Флм"),
    "Hebrews": ("Евреям", "Евр"),
    "James": ("Иакова", "Иак"),
    "1 Peter": ("1 Петра", "1 Пет", "1Пет"),
    "2 Peter": ("2 Петра", "2 Пет", "2Пет"),
    "1 John": ("1 Иоанна", "1 Ин", "1Ин"),
    "2 John": ("2 Иоанна", "2 Ин", "2Ин"),
    "3 John": ("3 Иоанна", "3 Ин", "3Ин"),
    "Jude": ("Иуды", "Иуд"),
    "Revelation": ("Откровение", "Откр"),
}
