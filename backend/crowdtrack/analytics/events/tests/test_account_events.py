"""Tests for profile, settings, friends and help events."""

import pytest

from crowdtrack.analytics.vocabulary import (
    CreatePasswordTrackingEvent,
    EmptyState,
    FriendsSource,
    HelpContext,
    HelpType,
    NewsletterContext,
    ShortcutItem,
)
from crowdtrack.schemas.preferences import Currency, Newsletter, ProjectNotificationProject


def test_profile_view(tracker, fake_client):
    tracker.track_profile_view()

    assert fake_client.names == ["Profile View My", "Viewed Profile"]


def test_email_notification_toggle(tracker, fake_client):
    tracker.track_change_email_notification("mobile_comments", on=True)
    tracker.track_change_email_notification("mobile_comments", on=False)

    assert fake_client.names == ["Enabled Email Notifications", "Disabled Email Notifications"]
    assert fake_client.events[0].properties["type"] == "mobile_comments"


def test_create_password_uses_event_name(tracker, fake_client):
    tracker.track_create_password(CreatePasswordTrackingEvent.VIEWED)

    assert fake_client.names == ["Viewed Create Password"]


def test_changed_currency(tracker, fake_client):
    tracker.track_changed_currency(Currency(code="EUR", description_text="Euro (€)"))

    assert fake_client.get("Selected Chosen Currency").properties["currency"] == "Euro (€)"


@pytest.mark.parametrize(
    "context, expected_events",
    [
        (NewsletterContext.SIGNUP, ["Subscribed To Newsletter", "Signup Newsletter Toggle"]),
        (NewsletterContext.FACEBOOK_SIGNUP, ["Subscribed To Newsletter", "Signup Newsletter Toggle"]),
        (NewsletterContext.THANKS, ["Subscribed To Newsletter", "Newsletter Subscribe"]),
        (NewsletterContext.SETTINGS, ["Subscribed To Newsletter"]),
    ],
    ids=["signup", "facebook_signup", "thanks", "settings"],
)
def test_newsletter_subscribe(context, expected_events, tracker, fake_client):
    tracker.track_change_newsletter(Newsletter.WEEKLY, True, None, context)

    assert fake_client.names == expected_events
    props = fake_client.get("Subscribed To Newsletter").properties
    assert props["context"] == context.value
    assert props["type"] == "weekly"


def test_newsletter_unsubscribe_on_thanks_with_project(tracker, fake_client, project):
    tracker.track_change_newsletter(Newsletter.ARTS, False, project, NewsletterContext.THANKS)

    assert fake_client.names == ["Unsubscribed From Newsletter", "Newsletter Unsubscribe"]
    props = fake_client.get("Newsletter Unsubscribe").properties
    assert props["project_pid"] == 1
    assert props["type"] == "arts"


def test_signup_newsletter_toggle_props(tracker, fake_client):
    tracker.track_change_newsletter(Newsletter.PROMO, False, None, NewsletterContext.SIGNUP)

    assert fake_client.get("Signup Newsletter Toggle").properties["send_newsletters"] is False


def test_project_notification(tracker, fake_client):
    tracker.track_change_project_notification(ProjectNotificationProject(id=9, name="Thing"))

    props = fake_client.get("Changed Project Notifications").properties
    assert props["id"] == 9
    assert props["name"] == "Thing"


def test_logout_modal_flow(tracker, fake_client):
    tracker.track_logout_modal()
    tracker.track_cancel_logout_modal()
    tracker.track_confirm_logout_modal()

    assert fake_client.names == ["Triggered Logout Modal", "Canceled Logout", "Confirmed Logout"]
    assert fake_client.get("Confirmed Logout").properties["context"] == "modal"


def test_friend_follow(tracker, fake_client):
    tracker.track_friend_follow(FriendsSource.SETTINGS)

    assert fake_client.names == ["Facebook Friend Follow", "Followed Facebook Friend"]
    legacy = fake_client.get("Facebook Friend Follow").properties
    assert legacy["source"] == "settings"
    assert legacy["DEPRECATED"] is True


def test_loaded_more_friends(tracker, fake_client):
    tracker.track_loaded_more_friends(FriendsSource.ACTIVITY, 2)

    props = fake_client.get("Loaded More Friends").properties
    assert props["source"] == "activity"
    assert props["page_count"] == 2


def test_help_events(tracker, fake_client):
    tracker.track_showed_help_menu(HelpContext.SETTINGS)
    tracker.track_selected_help_option(HelpContext.SETTINGS, HelpType.PRIVACY)
    tracker.track_opened_contact_email(HelpContext.SETTINGS)
    tracker.track_sent_contact_email(HelpContext.SETTINGS)

    assert fake_client.names == [
        "Showed Help Menu",
        "Selected Help Option",
        "Contact Email Open",
        "Sent Contact Email",
        "Contact Email Sent",
    ]
    assert fake_client.get("Selected Help Option").properties["type"] == "privacy"


def test_empty_state(tracker, fake_client):
    tracker.track_empty_state_button_tapped(EmptyState.STARRED)

    assert fake_client.get("Tapped Empty State Button").properties["type"] == "starred"


def test_performed_shortcut(tracker, fake_client):
    tracker.track_performed_shortcut_item(
        ShortcutItem.SEARCH, [ShortcutItem.RECOMMENDED_FOR_YOU, ShortcutItem.SEARCH]
    )

    props = fake_client.get("Performed Shortcut").properties
    assert props["type"] == "search"
    assert props["context"] == "recommended_for_you,search"
