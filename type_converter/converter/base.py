from typing import Any, ClassVar


class Converter:
    """Stateless one-way conversion from ``source_type`` to ``target_type``.

    Subclasses declare both types and implement ``convert``. Instances hold
    no state and may be shared across concurrent requests.
    """

    source_type: ClassVar[type]
    target_type: ClassVar[type]

    def convert(self, source: Any) -> Any:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.source_type.__name__} -> {self.target_type.__name__})"

