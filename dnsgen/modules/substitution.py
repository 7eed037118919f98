from dnsgen.models import BasePermutator


class WordSubstitution(BasePermutator):
    name = "substitution"

    def run(self, parts, words):
        if not parts.subdomains:  # Replacing the registrable name leaves the target
            return

        for word in words:
            yield parts.with_first_label(word)
