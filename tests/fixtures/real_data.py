"""
Real-world word lists for wordsim testing.

Contains realistic examples of:
- Misspelled words next to their corrections
- Person names with typos and variations
- Product names with spacing and case differences
- Names in non-Latin scripts
"""

# Misspelled words with corrections
MISSPELLINGS = [
    ("accomodate", "accommodate"),
    ("occurence", "occurrence"),
    ("recieve", "receive"),
    ("seperate", "separate"),
    ("definately", "definitely"),
    ("occured", "occurred"),
    ("refered", "referred"),
    ("untill", "until"),
    ("wierd", "weird"),
    ("thier", "their"),
    ("beleive", "believe"),
    ("concensus", "consensus"),
    ("enterpreneur", "entrepreneur"),
    ("goverment", "government"),
    ("independant", "independent"),
]

# Person names - common names with variations and typos
PERSON_NAMES = [
    "John Smith",
    "Jon Smith",
    "John Smyth",
    "Jonathan Smith",
    "Jane Doe",
    "Jan Doe",
    "Janet Doe",
    "Michael Johnson",
    "Mike Johnson",
    "Micheal Johnson",  # Common typo
    "Elizabeth Taylor",
    "Elisabeth Taylor",  # Variant spelling
    "Christopher Wilson",
    "Christoper Wilson",  # Typo
    "Kristopher Wilson",  # Variant
]

# Product names that only differ by case and spacing normalize to one token
PRODUCT_NAMES = [
    "iPhone 15 Pro",
    "IPHONE 15PRO",
    "iphone15 pro",
    "Galaxy S24",
    "galaxy  s 24",
]

# Names in different scripts (for Unicode testing)
INTERNATIONAL_NAMES = [
    "田中太郎",  # Japanese
    "김철수",  # Korean
    "Müller",  # German
    "François",  # French
    "José",  # Spanish
    "Владимир",  # Russian
    "Αλέξανδρος",  # Greek
    "Søren",  # Danish
]
