import sys

import click
import click_log
import logging

from dnsgen.aggregator import process
from dnsgen.config import (
    DEFAULT_THREADS,
    DEFAULT_WORD_LEN,
    MAX_WORD_LEN,
    MIN_WORD_LEN,
)
from dnsgen.generator import DomainGenerator
from dnsgen.models import WordlistError

log = logging.getLogger("dnsgen")
click_log.basic_config(log)


def read_domains(input_file):
    return [line.strip() for line in input_file.read().splitlines() if line.strip()]


def write_output(domains, output_file):
    if output_file:
        with open(output_file, "w") as f:
            f.write("\n".join(domains) + "\n" if domains else "")
        log.info("Results written to {}".format(output_file))
    else:
        for domain in domains:
            click.echo(domain)


@click.command()
@click.argument("input_file", type=click.File("r"), required=False)
@click.option(
    "-l",
    "--wordlen",
    "word_len",
    default=DEFAULT_WORD_LEN,
    type=click.IntRange(MIN_WORD_LEN, MAX_WORD_LEN),
    help="Minimum length of custom words extracted from domains.",
)
@click.option(
    "-w",
    "--wordlist",
    "wordlist_path",
    type=click.Path(dir_okay=False),
    help="Path to custom wordlist file.",
)
@click.option(
    "-f", "--fast", is_flag=True, help="Use fast generation mode (fewer permutations)."
)
@click.option(
    "-o", "--output", "output_file", help="Output file path. Defaults to stdout."
)
@click.option(
    "-t",
    "--threads",
    default=DEFAULT_THREADS,
    type=click.IntRange(min=1),
    help="Number of threads with which you want to run.",
)
@click.option("-q", "--quiet", is_flag=True, help="Disable progress bar")
@click_log.simple_verbosity_option(log)
def main(input_file, word_len, wordlist_path, fast, output_file, threads, quiet):
    """Generate DNS name permutations for domain discovery.

    Seed domains are read from INPUT_FILE, or from stdin when it is piped.
    """
    if input_file is None:
        stdin = click.get_text_stream("stdin")
        if stdin.isatty():
            raise click.UsageError("Missing input filename")
        input_file = stdin

    input_domains = read_domains(input_file)
    log.info("Read {} domains from input".format(len(input_domains)))

    try:
        generator = DomainGenerator(wordlist_path, logger=log)
    except WordlistError as e:
        log.error("Failed to initialize generator: {}".format(e))
        sys.exit(1)
    log.info("Generator initialized successfully")

    generator.register_default_permutators()

    generated = process(
        input_domains,
        generator,
        word_len,
        fast,
        logger=log,
        threads=threads,
        quiet=quiet,
    )
    log.info("Generated {} unique domain variations".format(len(generated)))

    write_output(generated, output_file)
