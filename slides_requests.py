"""Slides API edit requests used to fill a cloned template."""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Union

REPLACE_METHOD_CENTER_INSIDE = "CENTER_INSIDE"


@dataclass(frozen=True)
class ReplaceTextRequest:
    """Replace every case-sensitive occurrence of ``placeholder`` with ``replacement``."""
    placeholder: str
    replacement: str
    match_case: bool = True

    def to_request(self) -> Dict[str, Any]:
        return {
            'replaceAllText': {
                'containsText': {
                    'text': self.placeholder,
                    'matchCase': self.match_case,
                },
                'replaceText': self.replacement,
            }
        }


@dataclass(frozen=True)
class ReplaceShapesWithImageRequest:
    """Replace every shape whose text contains ``shape_text`` with the image at ``image_url``."""
    shape_text: str
    image_url: str
    replace_method: str = REPLACE_METHOD_CENTER_INSIDE
    match_case: bool = True

    def to_request(self) -> Dict[str, Any]:
        return {
            'replaceAllShapesWithImage': {
                'containsText': {
                    'text': self.shape_text,
                    'matchCase': self.match_case,
                },
                'imageUrl': self.image_url,
                'replaceMethod': self.replace_method,
            }
        }


EditRequest = Union[ReplaceTextRequest, ReplaceShapesWithImageRequest]


def build_batch_body(requests: Iterable[EditRequest]) -> Dict[str, List[Dict[str, Any]]]:
    """Render edit requests, in order, as a ``presentations.batchUpdate`` body."""
    return {'requests': [request.to_request() for request in requests]}
