# src/pess/core/vocabulary.py
"""
Built-in vocabulary: bird-related words.

Some plurals and some singulars are listed; nothing is stemmed, so
"insect" and "insects" are separate entries.
"""

NOUNS = (
    "order", "nostrils", "bill", "waterfowl", "falconiforms", "meat",
    "talons", "feet", "passerformes", "flycatcher", "voice", "toe", "size",
    "wings", "family", "albatross", "neck", "colour", "flight", "profile",
    "birds", "swan", "goose", "duck", "vulture", "head", "tail", "falcon",
    "insect", "swallow", "fulmar", "whistle", "trumpeting", "season",
    "country", "cheeks", "summer", "winter", "canada", "quack", "mallard",
    "pintail", "bird", "throat", "insects",
)

ADVERBS = (
    "very", "slowly", "carefully", "languidly", "ponderously", "powerfully",
    "agilely", "mottled",
)

ADJECTIVES = (
    "external", "tubular", "hooked", "webbed", "flat", "curved", "sharp",
    "one", "long", "pointed", "backward", "large", "narrow", "white", "dark",
    "black", "ponderous", "plump", "powerful", "broad", "flying", "forked",
    "short", "medium", "muffled", "musical", "loud", "green", "brown",
    "v-shaped", "rusty", "square",
)

# Doing verbs (not is/are or has/have/contain/contains).
VERBS = (
    "eats", "flies", "lives", "feeds", "scavenges", "quacks", "summers",
    "winters",
)
