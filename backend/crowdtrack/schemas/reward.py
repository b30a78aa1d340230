"""Reward and backing schemas."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Id of the synthetic "no reward" pledge option.
NO_REWARD_ID = 0


class ShippingPreference(str, Enum):
    """Reward shipping restriction; values are the tracked labels."""

    NONE = "none"
    RESTRICTED = "restricted"
    UNRESTRICTED = "unrestricted"


class RewardShipping(BaseModel):
    """Shipping options of a reward."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    preference: Optional[ShippingPreference] = None


class RewardItem(BaseModel):
    """An item bundled with a reward."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: Optional[str] = None
    quantity: int = 1


class Reward(BaseModel):
    """A project reward tier."""

    model_config = ConfigDict(frozen=True)

    id: int
    minimum: float = 0.0
    limit: Optional[int] = None
    title: Optional[str] = None
    shipping: RewardShipping = Field(default_factory=RewardShipping)
    rewards_items: List[RewardItem] = Field(default_factory=list)

    @property
    def is_no_reward(self) -> bool:
        """Whether this is the "pledge without a reward" option."""
        return self.id == NO_REWARD_ID

    @classmethod
    def no_reward(cls, minimum: float = 1.0) -> "Reward":
        """The "pledge without a reward" option."""
        return cls(id=NO_REWARD_ID, minimum=minimum)


class Backing(BaseModel):
    """A user's pledge to a project."""

    model_config = ConfigDict(frozen=True)

    id: int
    amount: float
    reward_id: Optional[int] = None
