from .config import log_info, log_warn
from .errors import EmptyKeyError, InvalidCharacterError

# Uppercase Latin alphabet; position doubles as the shift amount
ALPH = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'

ALPH_LEN = len(ALPH)  # This is 26
# A fast lookup map to get the index of a character
ALPH_MAP = {char: i for i, char in enumerate(ALPH)}


def to_index(c: str) -> int:
    """Alphabet position of an uppercase letter: A -> 0 ... Z -> 25."""
    try:
        return ALPH_MAP[c]
    except (KeyError, TypeError):
        raise InvalidCharacterError(c) from None

def to_char(i: int) -> str:
    """Letter at alphabet position i, the inverse of to_index."""
    if isinstance(i, bool) or not isinstance(i, int) or not 0 <= i < ALPH_LEN:
        raise InvalidCharacterError(i)
    return ALPH[i]

def rotate_forward(i: int, amount: int) -> int:
    # Z rotated by 1 wraps to A
    return (i + amount) % ALPH_LEN

def rotate_backward(i: int, amount: int) -> int:
    # Python's % floors for a positive divisor, so A rotated back by 1 is Z, never -1
    return (i - amount) % ALPH_LEN

def _positions(s: str, field: str) -> list:
    """Map every character to its alphabet position, naming the first bad one."""
    out = []
    for pos, ch in enumerate(s):
        if ch not in ALPH_MAP:
            log_warn(f"rejecting {field}: invalid character at position {pos}")
            raise InvalidCharacterError(ch, pos, field)
        out.append(ALPH_MAP[ch])
    return out

def _key_shifts(key: str) -> list:
    if not key:
        log_warn("rejecting empty key")
        raise EmptyKeyError()
    return _positions(key, "key")

def _transform(key: str, text: str, rotate) -> str:
    shifts = _key_shifts(key)
    K_LEN = len(shifts)
    out = []

    for i, p in enumerate(_positions(text, "text")):
        # Cycle over the key: with a 3-letter key, text positions 0 and 3 share a shift
        out.append(to_char(rotate(p, shifts[i % K_LEN])))

    return ''.join(out)

def encrypt(key: str, plaintext: str) -> str:
    log_info(f"encrypt: key length {len(key)}, text length {len(plaintext)}")
    return _transform(key, plaintext, rotate_forward)

def decrypt(key: str, ciphertext: str) -> str:
    log_info(f"decrypt: key length {len(key)}, text length {len(ciphertext)}")
    return _transform(key, ciphertext, rotate_backward)
