import logging

import pytest

from dnsgen.generator import DomainGenerator


@pytest.fixture
def wordlist(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("dev\n\n  staging  \n")
    return str(path)


@pytest.fixture
def logger():
    # Not under "dnsgen", whose logger stops propagating once the cli is imported
    return logging.getLogger("dnsgen_tests")


@pytest.fixture
def generator(wordlist, logger):
    generator = DomainGenerator(wordlist, logger=logger)
    generator.register_default_permutators()
    return generator
