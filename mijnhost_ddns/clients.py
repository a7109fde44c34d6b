#
#
#

"""Protocol definitions for record store and address lookup interfaces.

This module defines structural typing (PEP 544) for the collaborators of
the update cycle, allowing type checking without requiring explicit
inheritance.
"""

from ipaddress import IPv4Address, IPv6Address
from typing import List, Optional, Protocol

from .records import Record


class RecordStore(Protocol):
    """Protocol defining the expected interface for DNS record stores.

    MijnHostClient conforms to this interface; tests substitute mocks.
    """

    def records_get(self, domain: str) -> List[Record]:
        """Fetch the full record set of a domain.

        Args:
            domain: Domain name (without trailing dot)

        Returns:
            Every record of the domain, in provider order
        """
        ...

    def records_put(self, domain: str, records: List[Record]) -> None:
        """Replace the full record set of a domain.

        Args:
            domain: Domain name (without trailing dot)
            records: The complete new record set
        """
        ...


class AddressLookup(Protocol):
    """Protocol for public address discovery."""

    def ipv4(self) -> Optional[IPv4Address]:
        ...

    def ipv6(self) -> Optional[IPv6Address]:
        ...
