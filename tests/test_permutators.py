from dnsgen.models import DomainParts
from dnsgen.modules import (
    Duplication,
    HyphenToggle,
    NumericSuffix,
    WordInsertion,
    WordSubstitution,
)
from dnsgen.registry import PermutatorRegistry


def parse(domain):
    return DomainParts.parse(domain)


def test_word_insertion():
    result = set(WordInsertion()(parse("api.example.com"), {"dev"}))
    assert result == {
        "dev-api.example.com",
        "api-dev.example.com",
        "api.dev-example.com",
        "api.example-dev.com",
        "dev.api.example.com",
        "api.dev.example.com",
    }


def test_word_insertion_without_words():
    assert list(WordInsertion()(parse("api.example.com"), set())) == []


def test_word_substitution():
    result = set(WordSubstitution()(parse("api.example.com"), {"dev", "web"}))
    assert result == {"dev.example.com", "web.example.com"}


def test_word_substitution_needs_subdomain():
    assert list(WordSubstitution()(parse("example.com"), {"dev"})) == []


def test_numeric_suffix():
    result = list(NumericSuffix()(parse("api.example.com"), set()))
    assert result == [
        "api1.example.com",
        "api2.example.com",
        "api3.example.com",
        "api01.example.com",
        "api02.example.com",
        "api03.example.com",
    ]


def test_numeric_suffix_disabled_in_fast_mode():
    assert list(NumericSuffix()(parse("api.example.com"), {"dev"}, fast=True)) == []


def test_hyphen_toggle_removes_hyphens():
    result = list(HyphenToggle()(parse("dev-api.example.com"), set()))
    assert result == ["devapi.example.com"]


def test_hyphen_toggle_inserts_at_word_boundaries():
    result = list(HyphenToggle()(parse("devapi.example.com"), {"dev", "api"}))
    assert result == ["dev-api.example.com"]


def test_hyphen_toggle_inserts_at_digit_boundaries():
    result = list(HyphenToggle()(parse("api2.example.com"), set()))
    assert result == ["api-2.example.com"]


def test_hyphen_toggle_ignores_whole_label_word():
    assert list(HyphenToggle()(parse("devapi.example.com"), {"devapi"})) == []


def test_duplication():
    assert list(Duplication()(parse("api.example.com"), set())) == [
        "apiapi.example.com"
    ]
    assert list(Duplication()(parse("api.example.com"), set(), fast=True)) == []


def test_registry_defaults():
    registry = PermutatorRegistry()
    registry.register_defaults()
    assert [p.name for p in registry.all()] == [
        "insertion",
        "substitution",
        "numeric",
        "hyphen",
        "duplication",
    ]


def test_registry_keeps_registration_order():
    registry = PermutatorRegistry()
    registry.register(Duplication())
    registry.register(WordInsertion())
    assert [p.name for p in registry.all()] == ["duplication", "insertion"]
    assert len(registry) == 2
