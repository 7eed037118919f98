import re

from dnsgen.config import MAX_WORD_LEN, MIN_WORD_LEN
from dnsgen.models import DomainParts, WordlistError


TOKEN_RE = re.compile(r"[a-z]+|[0-9]+")


def split_label(label):
    """Split a label on hyphens and on letter/digit boundaries."""
    return TOKEN_RE.findall(label.lower())


def extract_words(domain, min_len):
    if not isinstance(domain, DomainParts):
        domain = DomainParts.parse(domain)

    return {
        token
        for label in domain.host_labels
        for token in split_label(label)
        if len(token) >= min_len
    }


def load_wordlist(path):
    try:
        with open(path, encoding="utf-8") as wordlist_file:
            lines = wordlist_file.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise WordlistError(f"Unable to read wordlist {path}: {e}") from e

    return {line.strip().lower() for line in lines if line.strip()}


def validate_word_len(min_len):
    if not MIN_WORD_LEN <= min_len <= MAX_WORD_LEN:
        raise ValueError(
            f"word length must be between {MIN_WORD_LEN} and {MAX_WORD_LEN}"
        )
