"""
Error Model - structured errors for JSON responses
Following Single Responsibility Principle for error representation
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union


@dataclass
class Error:
    """Single error entry rendered into the "errors" list of a response"""

    message: str
    message_template: Optional[str] = None
    parameters: Dict[str, Any] = field(default_factory=dict)
    pluralization: Optional[int] = None
    code: Union[int, str, None] = None
    origin: Optional[str] = None

    def __post_init__(self):
        if self.message_template is None:
            self.message_template = self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for API responses"""
        data = {
            'message': self.message,
            'template': self.message_template,
            'parameters': self.parameters,
            'code': self.code,
            'origin': self.origin,
        }
        if self.pluralization is not None:
            data['pluralization'] = self.pluralization
        return data


class ErrorList:
    """
    Ordered collection of errors
    Subclassed by adapters that translate framework errors into Error objects
    """

    def __init__(self, errors: Optional[Iterable[Error]] = None, code: Union[int, str, None] = None):
        self._errors: List[Error] = []
        self.code = code
        if errors is not None:
            self.extend(errors)

    def add(self, error: Error) -> 'ErrorList':
        """Append a single error"""
        if not isinstance(error, Error):
            raise TypeError(f"ErrorList accepts Error instances, got {type(error).__name__}")
        self._errors.append(error)
        return self

    def extend(self, errors: Iterable[Error]) -> 'ErrorList':
        for error in errors:
            self.add(error)
        return self

    def to_list(self) -> List[Dict[str, Any]]:
        return [error.to_dict() for error in self._errors]

    def __iter__(self) -> Iterator[Error]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __getitem__(self, index: int) -> Error:
        return self._errors[index]

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} code={self.code!r} errors={len(self._errors)}>"
