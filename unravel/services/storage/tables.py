from types import MappingProxyType

# International Morse code, plus the separators used between words.
MORSE_CODE_TABLE = MappingProxyType({
    ".-": "A", "-...": "B", "-.-.": "C", "-..": "D", ".": "E",
    "..-.": "F", "--.": "G", "....": "H", "..": "I", ".---": "J",
    "-.-": "K", ".-..": "L", "--": "M", "-.": "N", "---": "O",
    ".--.": "P", "--.-": "Q", ".-.": "R", "...": "S", "-": "T",
    "..-": "U", "...-": "V", ".--": "W", "-..-": "X", "-.--": "Y",
    "--..": "Z",

    ".----": "1", "..---": "2", "...--": "3", "....-": "4", ".....": "5",
    "-....": "6", "--...": "7", "---..": "8", "----.": "9", "-----": "0",

    ".-...": "&", ".--.-.": "@", "---...": ":", "--..--": ",",
    ".-.-.-": ".", ".----.": "'", ".-..-.": "\"", "..--..": "?",
    "-..-.": "/", "-...-": "=", ".-.-.": "+", "-....-": "-",
    "-.--.": "(", "-.--.-": ")", "-.-.--": "!",

    "/": " ",
    "": " ",
})
