from dnsgen.modules.insertion import WordInsertion
from dnsgen.modules.substitution import WordSubstitution
from dnsgen.modules.numeric import NumericSuffix
from dnsgen.modules.hyphen import HyphenToggle
from dnsgen.modules.duplication import Duplication

DEFAULT_PERMUTATORS = (
    WordInsertion,
    WordSubstitution,
    NumericSuffix,
    HyphenToggle,
    Duplication,
)
