class LengthMismatchError(ValueError):
    """Raised when attribute values and class labels differ in length."""

    def __init__(self, attribute_length: int, classes_length: int):
        self.attribute_length: int = attribute_length
        self.classes_length: int = classes_length
        super().__init__(
            f"attribute and classes must be the same length.\n"
            f"Got {attribute_length} attribute values and "
            f"{classes_length} class labels.\n"
            f"Hint: each attribute value needs exactly one class label at the "
            f"same position."
        )


class QuantizeInvariantError(RuntimeError):
    """An internal invariant was broken while building intervals.

    This signals a bug in split trimming or interval building, not bad input.
    """
