"""Share contexts and share activity types."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from crowdtrack.schemas.activity import Update
from crowdtrack.schemas.project import Project


class ShareActivityType(str, Enum):
    """Share targets with a dedicated tracking label.

    Share activity types are open-ended; raw strings not listed here are
    accepted wherever a ``ShareActivityType`` is.
    """

    POST_TO_FACEBOOK = "com.apple.UIKit.activity.PostToFacebook"
    MESSAGE = "com.apple.UIKit.activity.Message"
    MAIL = "com.apple.UIKit.activity.Mail"
    COPY_TO_PASTEBOARD = "com.apple.UIKit.activity.CopyToPasteboard"
    POST_TO_TWITTER = "com.apple.UIKit.activity.PostToTwitter"
    NOTES = "com.apple.mobilenotes.SharingExtension"
    SAFARI = "com.kickstarter.kickstarter.safari"


class ShareContextKind(str, Enum):
    """Screen a share was started from; values are the tracked labels."""

    CREATOR_DASHBOARD = "creator_dashboard"
    DISCOVERY = "discovery"
    PROJECT = "project"
    THANKS = "thanks"
    UPDATE = "update"


class ShareContext(BaseModel):
    """What is being shared and from where."""

    model_config = ConfigDict(frozen=True)

    kind: ShareContextKind
    project: Project
    update: Optional[Update] = None

    @model_validator(mode="after")
    def validate_update(self):
        """An update is required for, and only for, update shares."""
        if (self.kind == ShareContextKind.UPDATE) != (self.update is not None):
            raise ValueError("update must be set exactly when kind is 'update'")
        return self

    @property
    def is_thanks_context(self) -> bool:
        return self.kind == ShareContextKind.THANKS
