from enum import Enum


class Language(str, Enum):
    DE = "de"
    EN = "en"
