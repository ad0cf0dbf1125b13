from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from userdir.domain.ports import UserSourcePort

_FIRST = ("Leanne", "Ervin", "Clementine", "Patricia", "Chelsey", "Dennis",
          "Kurtis", "Nicholas", "Glenna", "Clementina", "Ada", "Mateo")
_LAST = ("Graham", "Howell", "Bauch", "Lebsack", "Dietrich", "Schulist",
         "Weissnat", "Runolfsdottir", "Reichert", "DuBuque", "Okafor", "Núñez")
_CITIES = ("Gwenborough", "Wisokyburgh", "McKenziehaven", "South Elvis", "Roscoeview")
_COMPANIES = ("Romaguera-Crona", "Deckow-Crist", "Keebler LLC", "Robel-Corkery")


@dataclass
class UserSourceMock(UserSourcePort):
    """Offline substitute for ``UserRestAdapter`` with deterministic payloads.

    ``fail_with`` makes the next ``fetch_all`` raise that exception once.
    """

    count: int = 12
    fail_with: Optional[Exception] = None
    calls: int = field(default=0, init=False)

    def fetch_all(self) -> List[Dict[str, Any]]:
        self.calls += 1
        if self.fail_with is not None:
            exc, self.fail_with = self.fail_with, None
            raise exc
        return [self._payload(index) for index in range(self.count)]

    @staticmethod
    def _payload(index: int) -> Dict[str, Any]:
        user_id = index + 1
        first = _FIRST[index % len(_FIRST)]
        last = _LAST[(index * 7) % len(_LAST)]
        handle = f"{first}.{last}".lower().replace(" ", "")
        return {
            "id": user_id,
            "name": f"{first} {last}",
            "username": f"{first[:3]}{user_id:02d}",
            "email": f"{handle}@example.org",
            "phone": f"1-770-736-{8031 + user_id:04d}",
            "website": f"{last.lower()}.example.org",
            "company": {
                "name": _COMPANIES[index % len(_COMPANIES)],
                "catchPhrase": "Multi-layered client-server neural-net",
            },
            "address": {
                "street": f"{100 + user_id} Kulas Light",
                "city": _CITIES[index % len(_CITIES)],
            },
        }


__all__ = ["UserSourceMock"]
