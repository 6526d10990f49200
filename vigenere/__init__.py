"""Vigenère rotation cipher over uppercase A-Z text."""
from .cipher import (ALPH, ALPH_LEN, to_index, to_char, rotate_forward, rotate_backward,
                     encrypt, decrypt)
from .errors import VigenereError, EmptyKeyError, InvalidCharacterError
