"""
Literal placeholder substitution over template text.
"""

from __future__ import annotations

from typing import Dict, List, Mapping


class TokenSubstitutor:
    """
    Replace placeholder tokens with their answers in a single left-to-right pass.

    Tokens are matched literally. At any position the longest matching token
    wins, replaced text is never rescanned, and text that is not a known token
    is copied through unchanged.
    """

    def __init__(self, answers: Mapping[str, str]) -> None:
        self._answers: Dict[str, str] = {token: answers[token] for token in answers if token}
        self._by_first_char: Dict[str, List[str]] = {}
        for token in sorted(self._answers, key=len, reverse=True):
            self._by_first_char.setdefault(token[0], []).append(token)

    def render(self, template: str) -> str:
        if not self._by_first_char:
            return template

        pieces: List[str] = []
        plain_start = 0
        index = 0
        length = len(template)
        while index < length:
            candidates = self._by_first_char.get(template[index])
            matched = None
            if candidates:
                for token in candidates:
                    if template.startswith(token, index):
                        matched = token
                        break
            if matched is None:
                index += 1
                continue
            pieces.append(template[plain_start:index])
            pieces.append(self._answers[matched])
            index += len(matched)
            plain_start = index
        pieces.append(template[plain_start:])
        return "".join(pieces)


def substitute(answers: Mapping[str, str], template: str) -> str:
    """Render a single template with the given answer map."""
    return TokenSubstitutor(answers).render(template)
