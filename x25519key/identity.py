"""Identity fields shared by linked-data key pairs."""

# Standard lib
from typing import NamedTuple, Optional

# Internal modules
from x25519key.config import SECURITY_CONTEXT_URL


class KeyPairIdentity(NamedTuple):
    """The `id` and `controller` of a key pair.

    Both are opaque strings. A key pair embeds one of these rather than
    inheriting from a generic key pair class.
    """

    id: Optional[str] = None
    controller: Optional[str] = None

    def with_fingerprint(self, fingerprint: str): # -> KeyPairIdentity
        """Fill in a missing id as `controller#fingerprint`.

        Returned unchanged if there is already an id or there is no
        controller to derive one from.
        """

        if self.controller and not self.id:
            return self._replace(id=f'{self.controller}#{fingerprint}')
        return self

    def export(self, type: str, include_context: bool = False) -> dict:
        """Get the identity fields of a key node, leaving out unset ones."""

        node = {}
        if include_context:
            node['@context'] = SECURITY_CONTEXT_URL
        if self.id is not None:
            node['id'] = self.id
        node['type'] = type
        if self.controller is not None:
            node['controller'] = self.controller

        return node
