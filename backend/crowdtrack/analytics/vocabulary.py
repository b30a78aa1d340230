"""Tracking vocabularies.

Each enum's values are the exact strings sent to the sinks, so a member's
``.value`` is its tracking label. The strings are consumed by dashboards:
changing one is a breaking change.
"""

from enum import Enum


class AuthType(str, Enum):
    """Authentication method for login and signup events."""

    EMAIL = "Email"
    FACEBOOK = "Facebook"


class LoginIntent(str, Enum):
    """Why the login/signup tout was shown."""

    ACTIVITY = "activity"
    BACK_PROJECT = "pledge"
    DISCOVERY_ONBOARDING = "discovery_onboarding"
    ERRORED_PLEDGE = "errored_pledge"
    FAVORITE_PROJECT = "star"
    GENERIC = "generic"
    LOGIN_TAB = "login_tab"
    MESSAGE_CREATOR = "new_message"


class ExternalLinkContext(str, Enum):
    """Screen an external link was opened from."""

    PROJECT_CREATOR = "project_creator"
    PROJECT_DESCRIPTION = "project_description"
    PROJECT_UPDATE = "project_update"
    PROJECT_UPDATES = "project_updates"


class MessageDialogContext(str, Enum):
    """Screen the message dialog was presented from."""

    BACKER_MODAL = "backer_modal"
    CREATOR_ACTIVITY = "creator_activity"
    MESSAGES = "messages"
    PROJECT_MESSAGES = "project_messages"
    PROJECT_PAGE = "project_page"


class CommentDialogContext(str, Enum):
    """Screen the comment dialog was presented from."""

    PROJECT_ACTIVITY = "project_activity"
    PROJECT_COMMENTS = "project_comments"
    UPDATE_COMMENTS = "update_comments"


class CommentDialogType(str, Enum):
    """Kind of comment being written."""

    PROJECT = "project"
    UPDATE = "update"


class CommentsContext(str, Enum):
    """Which comment list is shown."""

    PROJECT = "project"
    UPDATE = "update"


class SaveContext(str, Enum):
    """Screen a project was saved from."""

    DISCOVERY = "discovery"
    PROJECT = "project"


class NewsletterContext(str, Enum):
    """Screen the newsletter toggle was presented on."""

    FACEBOOK_SIGNUP = "facebook_signup"
    SETTINGS = "settings"
    SIGNUP = "signup"
    THANKS = "thanks"


class PledgeContext(str, Enum):
    """Pledge flow: a new pledge, or changing an existing backing."""

    CHANGE_REWARD = "change_reward"
    MANAGE_REWARD = "manage_reward"
    NEW_PLEDGE = "new_pledge"


class PledgeStateCTAType(str, Enum):
    """State of the pledge call-to-action button on the project page."""

    FIX = "fix"
    PLEDGE = "pledge"
    MANAGE = "manage"
    SEE_REWARDS = "see_rewards"
    VIEW_BACKING = "view_backing"
    VIEW_REWARDS = "view_rewards"
    VIEW_YOUR_REWARDS = "view_your_rewards"


class ManagePledgeMenuCTAType(str, Enum):
    """Options in the manage-pledge menu."""

    CANCEL_PLEDGE = "cancel_pledge"
    CHANGE_PAYMENT_METHOD = "change_payment_method"
    CHOOSE_ANOTHER_REWARD = "choose_another_reward"
    CONTACT_CREATOR = "contact_creator"
    UPDATE_PLEDGE = "update_pledge"
    VIEW_REWARDS = "view_rewards"


class ClickedRewardPledgeButtonType(str, Enum):
    """Buttons on the reward pledge screen."""

    APPLE_PAY = "apple_pay"
    CANCEL = "cancel"
    CHANGE_PAYMENT_METHOD = "change_payment_method"
    PAYMENT_METHODS = "payment_methods"
    UPDATE_PLEDGE = "update_pledge"


class ErroredRewardPledgeButtonClickType(str, Enum):
    """Validation errors when pressing a reward pledge button."""

    MAXIMUM_AMOUNT = "MAXIMUM_AMOUNT"
    MINIMUM_AMOUNT = "MINIMUM_AMOUNT"


class PaymentMethod(str, Enum):
    APPLE_PAY = "apple_pay"


class CheckoutPageContext(str, Enum):
    """Pages on which checkout events can occur."""

    PAYMENTS_PAGE = "Payments Page"
    PROJECT_PAGE = "Project Page"
    REWARD_SELECTION = "Reward Selection"


class CheckoutContext(str, Enum):
    """Screen hosting a checkout call-to-action."""

    BACK_THIS_PAGE = "Back this page"
    PROJECT_PAGE = "Project page"


class TabBarItemLabel(str, Enum):
    DISCOVERY = "discovery"
    ACTIVITY = "activity"
    SEARCH = "search"
    DASHBOARD = "dashboard"
    PROFILE = "profile"


class CreatePasswordTrackingEvent(str, Enum):
    """Create-password events; values are the event names themselves."""

    PASSWORD_CREATED = "Created Password"
    VIEWED = "Viewed Create Password"


class Mailbox(str, Enum):
    INBOX = "inbox"
    SENT = "sent"


class ProfileProjectsType(str, Enum):
    """Tabs on the profile screen."""

    BACKED = "backed"
    SAVED = "saved"


class FriendsSource(str, Enum):
    """Screen the find-friends flow was entered from."""

    ACTIVITY = "activity"
    DISCOVERY = "discovery"
    FIND_FRIENDS = "find_friends"
    SETTINGS = "settings"


class HelpContext(str, Enum):
    """Screen the help menu was opened from."""

    FACEBOOK_CONFIRMATION = "facebook_confirmation"
    LOGIN_TOUT = "login_tout"
    SETTINGS = "settings"
    SIGNUP = "signup"


class HelpType(str, Enum):
    """Entries in the help menu."""

    ACCESSIBILITY = "accessibility"
    COMMUNITY = "community"
    CONTACT = "contact"
    COOKIE = "cookie"
    HELP_CENTER = "help_center"
    HOW_IT_WORKS = "how_it_works"
    PRIVACY = "privacy"
    TERMS = "terms"
    TRUST = "trust"


class AttachmentSource(str, Enum):
    """Where an update-draft attachment came from."""

    CAMERA = "camera"
    CAMERA_ROLL = "camera_roll"


class EmptyState(str, Enum):
    """Empty-state screens with a call-to-action button."""

    ACTIVITY = "activity"
    RECOMMENDED = "recommended"
    SOCIAL_DISABLED = "social_disabled"
    SOCIAL_NO_PLEDGES = "social_no_pledges"
    STARRED = "starred"


class ShortcutItem(str, Enum):
    """Home-screen quick actions."""

    CREATOR_DASHBOARD = "creator_dashboard"
    PROJECT_LAUNCH = "project_launch"
    PROJECT_OF_THE_DAY = "project_of_the_day"
    RECOMMENDED_FOR_YOU = "recommended_for_you"
    SEARCH = "search"
