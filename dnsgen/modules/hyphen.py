from dnsgen.models import BasePermutator


class HyphenToggle(BasePermutator):
    name = "hyphen"
    uses_words = False

    def run(self, parts, words):
        label = parts.first_label

        if "-" in label:
            yield parts.with_first_label(label.replace("-", ""))
            return

        for i in sorted(self.split_points(label, words)):
            yield parts.with_first_label(f"{label[:i]}-{label[i:]}")

    @staticmethod
    def split_points(label, words):
        points = {
            i
            for i in range(1, len(label))
            if label[i - 1].isdigit() != label[i].isdigit()
        }

        for word in words:
            if len(word) >= len(label):
                continue
            if label.startswith(word):
                points.add(len(word))
            if label.endswith(word):
                points.add(len(label) - len(word))

        return points
