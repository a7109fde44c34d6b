#
#
#

"""DNS record value object as exchanged with the mijn.host API."""

from dataclasses import dataclass, field, replace
from typing import Dict


@dataclass
class Record:
    """One DNS resource record.

    Attributes:
        type: Record type, e.g. 'A' or 'AAAA'
        name: Fully-qualified name the record applies to
        value: Textual record data
        ttl: Time-to-live in seconds
        extra: Any additional keys the provider sent, passed back untouched
    """

    type: str
    name: str
    value: str
    ttl: int
    extra: Dict = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: Dict) -> 'Record':
        extra = {
            k: v
            for k, v in data.items()
            if k not in ('type', 'name', 'value', 'ttl')
        }
        return cls(
            type=data['type'],
            name=data['name'],
            value=data['value'],
            ttl=int(data['ttl']),
            extra=extra,
        )

    def to_dict(self) -> Dict:
        ret = dict(self.extra)
        ret.update(
            {
                'type': self.type,
                'name': self.name,
                'value': self.value,
                'ttl': self.ttl,
            }
        )
        return ret

    def copy(self) -> 'Record':
        return replace(self, extra=dict(self.extra))

    def matches(self, _type: str, name: str) -> bool:
        return self.type == _type and self.name == name
