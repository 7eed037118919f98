from dnsgen.aggregator import process
from dnsgen.generator import DomainGenerator
from dnsgen.models import DnsgenError, DomainParts, MalformedDomain, WordlistError
from dnsgen.registry import PermutatorRegistry
