import logging

from dnsgen.config import FAST_WORD_LIMIT
from dnsgen.models import DomainParts, MalformedDomain, is_valid_hostname
from dnsgen.registry import PermutatorRegistry
from dnsgen.words import extract_words, load_wordlist, validate_word_len


class DomainGenerator:
    """Turns seed domains into candidate hostnames.

    The wordlist is read once here, so an unreadable path fails with
    WordlistError before any domain is processed. The wordlist and the
    registry are only read afterwards and can be shared between threads.
    """

    def __init__(self, wordlist_path=None, logger=None):
        self.log = logger or logging.getLogger("dnsgen")
        self.registry = PermutatorRegistry()
        self.wordlist = frozenset()

        if wordlist_path:
            self.wordlist = frozenset(load_wordlist(wordlist_path))
            self.log.debug(
                "Loaded {} words from {}".format(len(self.wordlist), wordlist_path)
            )

    def register_default_permutators(self):
        self.registry.register_defaults()

    def word_pool(self, parts, min_word_len, fast=False):
        words = extract_words(parts, min_word_len) | self.wordlist
        if fast:  # First N words in sorted order
            words = set(sorted(words)[:FAST_WORD_LIMIT])
        return words

    def generate(self, domains, min_word_len, fast=False):
        validate_word_len(min_word_len)

        results = set()
        for domain in domains:
            try:
                parts = DomainParts.parse(domain)
            except MalformedDomain as e:
                self.log.warning("Skipping domain: {}".format(e))
                continue

            results.update(self.permutate(parts, min_word_len, fast))

        return results

    def permutate(self, parts, min_word_len, fast=False):
        seed = parts.to_string()
        words = self.word_pool(parts, min_word_len, fast)

        candidates = set()
        for permutator in self.registry.all():
            try:
                produced = {
                    candidate
                    for candidate in permutator(parts, words, fast)
                    if candidate != seed and is_valid_hostname(candidate)
                }
            except Exception as e:
                self.log.exception(
                    "{}\nPermutator {} failed for {}!".format(e, permutator.name, seed)
                )
                continue

            candidates.update(produced)

        self.log.debug(
            "{}: {} words, {} candidates".format(seed, len(words), len(candidates))
        )
        return candidates
