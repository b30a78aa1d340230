"""Profile, settings, find friends and help menu events."""

from typing import Iterable, Optional

from crowdtrack.analytics.properties import deprecated, merge
from crowdtrack.analytics.vocabulary import (
    CreatePasswordTrackingEvent,
    EmptyState,
    FriendsSource,
    HelpContext,
    HelpType,
    NewsletterContext,
    ProfileProjectsType,
    ShortcutItem,
)
from crowdtrack.schemas.preferences import Currency, Newsletter, ProjectNotificationProject
from crowdtrack.schemas.project import Project


class AccountEvents:
    """Events from the profile and settings screens."""

    # ------------------------------------------------------------------
    # Profile
    # ------------------------------------------------------------------

    def track_profile_view(self) -> None:
        self.track("Profile View My", deprecated())
        self.track("Viewed Profile")

    def track_viewed_profile_tab(self, projects_type: ProfileProjectsType) -> None:
        self.track("Viewed Profile Tab", {"type": projects_type.value})

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    def track_app_store_rating_open(self) -> None:
        self.track("App Store Rating Open", deprecated())
        self.track("Opened App Store Listing")

    def track_recommendations_opt_in(self) -> None:
        self.track("Toggled recommendations", deprecated())

    def track_following_opt_in(self) -> None:
        self.track("Toggled following", deprecated())

    def track_cancel_logout_modal(self) -> None:
        self.track("Canceled Logout", {"context": "modal"})

    def track_confirm_logout_modal(self) -> None:
        self.track("Confirmed Logout", {"context": "modal"})

    def track_logout_modal(self) -> None:
        self.track("Triggered Logout Modal")

    def track_change_email_notification(self, notification_type: str, on: bool) -> None:
        event = "Enabled Email Notifications" if on else "Disabled Email Notifications"
        self.track(event, {"type": notification_type})

    def track_change_push_notification(self, notification_type: str, on: bool) -> None:
        event = "Enabled Push Notifications" if on else "Disabled Push Notifications"
        self.track(event, {"type": notification_type})

    def track_push_permission_opt_in(self) -> None:
        self.track("Confirmed Push Opt-In")

    def track_push_permission_opt_out(self) -> None:
        self.track("Dismissed Push Opt-In")

    def track_account_view(self) -> None:
        self.track("Viewed Account")

    def track_settings_view(self) -> None:
        self.track("Settings View", deprecated())
        self.track("Viewed Settings")

    def track_create_password(self, event: CreatePasswordTrackingEvent) -> None:
        self.track(event.value)

    def track_change_email_view(self) -> None:
        self.track("Viewed Change Email")

    def track_change_email(self) -> None:
        self.track("Changed Email")

    def track_change_password_view(self) -> None:
        self.track("Viewed Change Password")

    def track_change_password(self) -> None:
        self.track("Changed Password")

    def track_resent_verification_email(self) -> None:
        self.track("Resent Verification Email")

    def track_changed_currency(self, currency: Currency) -> None:
        self.track("Selected Chosen Currency", {"currency": currency.description_text})

    def track_change_newsletter(
        self,
        newsletter: Newsletter,
        send_newsletter: bool,
        project: Optional[Project],
        context: NewsletterContext,
    ) -> None:
        """Track toggling a newsletter preference.

        Args:
            newsletter: The newsletter toggled.
            send_newsletter: Whether the user now receives it.
            project: The referring project, e.g. on the thanks screen.
            context: The screen the toggle lives on.

        The current event always carries ``context`` and ``type``, with or
        without a project.
        """
        project_props = self._project_properties(project) if project is not None else {}
        props = merge(project_props, {"context": context.value, "type": newsletter.value})

        self.track(
            "Subscribed To Newsletter" if send_newsletter else "Unsubscribed From Newsletter",
            props,
        )

        if context in (NewsletterContext.SIGNUP, NewsletterContext.FACEBOOK_SIGNUP):
            self.track("Signup Newsletter Toggle", {"send_newsletters": send_newsletter})
        elif context is NewsletterContext.THANKS:
            self.track("Newsletter Subscribe" if send_newsletter else "Newsletter Unsubscribe", props)

    def track_change_project_notification(self, project: ProjectNotificationProject) -> None:
        self.track("Changed Project Notifications", {"name": project.name, "id": project.id})

    # ------------------------------------------------------------------
    # Find friends
    # ------------------------------------------------------------------

    def track_close_facebook_connect(self, source: FriendsSource) -> None:
        self.track("Close Facebook Connect", {"source": source.value})

    def track_close_find_friends(self, source: FriendsSource) -> None:
        self.track("Close Find Friends", {"source": source.value})

    def _track_friends_pair(self, legacy_event: str, event: str, source: FriendsSource) -> None:
        props = {"source": source.value}

        self.track(legacy_event, deprecated(props))
        self.track(event, props)

    def track_decline_friend_follow_all(self, source: FriendsSource) -> None:
        self._track_friends_pair(
            "Facebook Friend Decline Follow All", "Declined Follow All Facebook Friends", source
        )

    def track_facebook_connect(self, source: FriendsSource) -> None:
        self._track_friends_pair("Facebook Connect", "Connected Facebook", source)

    def track_facebook_connect_error(self, source: FriendsSource) -> None:
        self._track_friends_pair("Facebook Connect Error", "Errored Facebook Connect", source)

    def track_find_friends_view(self, source: FriendsSource) -> None:
        self._track_friends_pair("Find Friends View", "Viewed Find Friends", source)

    def track_friend_follow(self, source: FriendsSource) -> None:
        self._track_friends_pair("Facebook Friend Follow", "Followed Facebook Friend", source)

    def track_friend_follow_all(self, source: FriendsSource) -> None:
        self._track_friends_pair("Facebook Friend Follow All", "Followed All Facebook Friends", source)

    def track_friend_unfollow(self, source: FriendsSource) -> None:
        self._track_friends_pair("Facebook Friend Unfollow", "Unfollowed Facebook Friend", source)

    def track_loaded_more_friends(self, source: FriendsSource, page_count: int) -> None:
        self.track("Loaded More Friends", {"source": source.value, "page_count": page_count})

    # ------------------------------------------------------------------
    # Help
    # ------------------------------------------------------------------

    def track_canceled_contact_email(self, context: HelpContext) -> None:
        self.track("Canceled Contact Email", {"context": context.value})

    def track_canceled_help_menu(self, context: HelpContext) -> None:
        self.track("Canceled Help Menu", {"context": context.value})

    def track_opened_contact_email(self, context: HelpContext) -> None:
        # Legacy only; there is no current counterpart.
        self.track("Contact Email Open", deprecated())

    def track_selected_help_option(self, context: HelpContext, help_type: HelpType) -> None:
        self.track("Selected Help Option", {"context": context.value, "type": help_type.value})

    def track_sent_contact_email(self, context: HelpContext) -> None:
        self.track("Sent Contact Email", {"context": context.value})
        self.track("Contact Email Sent", deprecated())

    def track_showed_help_menu(self, context: HelpContext) -> None:
        self.track("Showed Help Menu", {"context": context.value})

    # ------------------------------------------------------------------
    # Misc
    # ------------------------------------------------------------------

    def track_empty_state_button_tapped(self, empty_state: EmptyState) -> None:
        self.track("Tapped Empty State Button", {"type": empty_state.value})

    def track_performed_shortcut_item(
        self, shortcut_item: ShortcutItem, available_shortcut_items: Iterable[ShortcutItem]
    ) -> None:
        self.track(
            "Performed Shortcut",
            {
                "type": shortcut_item.value,
                "context": ",".join(item.value for item in available_shortcut_items),
            },
        )
