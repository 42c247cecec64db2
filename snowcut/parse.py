# snowcut/parse.py


class ParseError(ValueError):
    def __init__(self, line_no, line, reason):
        super().__init__(f"Line {line_no}: {reason}: {line!r}")
        self.line_no = line_no


def parse_adjacency(text):
    """
    Parse `name: n1 n2 ...` lines into a symmetric adjacency mapping.

    Every label gets a key, including labels that only appear on the right
    hand side. Keys and neighbor lists keep first-appearance order.
    """
    adjacency = {}
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        name, sep, rest = line.partition(":")
        name = name.strip()
        if not sep:
            raise ParseError(line_no, line, "missing ':'")
        if not name:
            raise ParseError(line_no, line, "empty component name")

        adjacency.setdefault(name, [])
        for neighbor in rest.split():
            adjacency[name].append(neighbor)
            adjacency.setdefault(neighbor, []).append(name)
    return adjacency
