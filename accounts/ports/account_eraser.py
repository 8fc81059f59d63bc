"""
Account eraser port (interface).

Removes a principal together with everything that belongs to it.
Implementations are in the infrastructure layer.
"""

from abc import ABC, abstractmethod

from accounts.domain.principal import Principal


class AccountEraser(ABC):
    """
    Abstract all-or-nothing account removal.

    An erase either removes the principal and what it owns, or leaves
    every record in place. A brand owner's brand never outlives its
    owner, and the owner never outlives the brand.
    """

    @abstractmethod
    async def erase(self, principal: Principal) -> None:
        """
        Remove a principal and what it owns as one unit.

        A client's favorites go with it. A brand owner's brand goes with
        it, along with the brand's products and every favorite pointing
        at them.

        Args:
            principal: Principal to remove
        """
        pass
