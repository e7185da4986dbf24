"""
Run state shared by every command of one engine run.
"""


class Operations:
    """
    Mutable context of a single invocation.

    Fields
    - source_path: path bound by the source-file command ("" until bound).
    - output_path: where the report must be written ("" means return it).
    - source: text of the source file ("" until bound).
    - panicked: set by the engine once the run is aborted.

    A fresh instance is created for every run; commands receive it in both
    validate and execute and may change it during validation.
    """
    __slots__ = ("source_path", "output_path", "source", "panicked")

    def __init__(self):
        self.source_path = ""
        self.output_path = ""
        self.source = ""
        self.panicked = False

    def __rich_repr__(self):
        yield "source_path", self.source_path
        yield "output_path", self.output_path
        yield "source", self.source
        yield "panicked", self.panicked

    def __repr__(self):
        return f"operations({", ".join("%s=%r" % pair for pair in self.__rich_repr__())})"


__all__ = (
    "Operations",
)
