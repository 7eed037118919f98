import concurrent.futures
import logging

from concurrent.futures import ThreadPoolExecutor
from tqdm import tqdm

from dnsgen.config import DEFAULT_THREADS
from dnsgen.words import validate_word_len


def process(
    domains,
    generator,
    min_word_len,
    fast=False,
    logger=None,
    threads=DEFAULT_THREADS,
    quiet=True,
):
    log = logger or logging.getLogger("dnsgen")
    validate_word_len(min_word_len)

    if not domains:
        return []

    log.info("Generating domain variations...")

    unique_domains = set()
    # One task per domain, run on at most `threads` workers
    workers = min(threads or DEFAULT_THREADS, len(domains))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {
            executor.submit(generator.generate, [domain], min_word_len, fast): domain
            for domain in domains
        }

        for future in tqdm(
            concurrent.futures.as_completed(futures),
            desc=" domains",
            total=len(futures),
            disable=quiet or len(futures) < 2,
        ):
            try:
                unique_domains.update(future.result())
            except Exception as e:
                log.exception(
                    "{}\nGeneration failed for {}!".format(e, futures[future])
                )

    log.info("Finished generating domain variations")
    return sorted(unique_domains)
