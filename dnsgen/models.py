import re

from dataclasses import dataclass

from dnsgen.config import (
    MAX_HOSTNAME_LENGTH,
    MAX_LABEL_LENGTH,
    MAX_LABELS,
    SECOND_LEVEL_LABELS,
)


LABEL_RE = re.compile(r"[a-z0-9](?:[a-z0-9-]*[a-z0-9])?")


class DnsgenError(Exception):
    pass


class WordlistError(DnsgenError):
    pass


class MalformedDomain(DnsgenError, ValueError):
    pass


def is_valid_hostname(hostname):
    if not hostname or len(hostname) > MAX_HOSTNAME_LENGTH:
        return False

    labels = hostname.split(".")
    if len(labels) > MAX_LABELS:
        return False

    return all(
        len(label) <= MAX_LABEL_LENGTH and LABEL_RE.fullmatch(label)
        for label in labels
    )


@dataclass(frozen=True)
class DomainParts:
    subdomains: tuple
    name: str
    suffix: tuple

    @classmethod
    def parse(cls, domain):
        hostname = domain.strip().lower().rstrip(".")
        labels = hostname.split(".")

        if len(labels) < 2 or not is_valid_hostname(hostname):
            raise MalformedDomain(f"Not a valid domain name: {domain!r}")

        suffix_len = 1
        if len(labels) > 2 and labels[-2] in SECOND_LEVEL_LABELS:
            suffix_len = 2

        return cls(
            subdomains=tuple(labels[: -suffix_len - 1]),
            name=labels[-suffix_len - 1],
            suffix=tuple(labels[-suffix_len:]),
        )

    @property
    def host_labels(self):
        """Every label left of the public suffix."""
        return self.subdomains + (self.name,)

    @property
    def labels(self):
        return self.host_labels + self.suffix

    @property
    def first_label(self):
        return self.labels[0]

    def to_string(self):
        return ".".join(self.labels)

    def join(self, host_labels):
        return ".".join(tuple(host_labels) + self.suffix)

    def with_first_label(self, label):
        return self.join((label,) + self.host_labels[1:])


class BasePermutator:
    name = "default"
    # Strategies that fast mode switches off
    high_cardinality = False
    uses_words = True

    def __call__(self, parts, words, fast=False):
        if fast and self.high_cardinality:
            return iter(())
        if self.uses_words and not words:
            return iter(())
        return self.run(parts, words)

    def run(self, parts, words):
        raise NotImplementedError
