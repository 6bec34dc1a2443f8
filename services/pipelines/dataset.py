"""Key characters from William Shakespeare's Hamlet."""

from typing import Tuple

CHARACTERS: Tuple[str, ...] = (
    "horatio",
    "claudius",
    "Gertrude",
    "Hamlet",
    "laertes",
    "Ophelia",
)

CHARACTERS_CSV = ",".join(CHARACTERS)
