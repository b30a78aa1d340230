"""Login, signup, password reset and two-factor events.

Each call emits the deprecated legacy event first, then the current one.
"""

from crowdtrack.analytics.properties import DEPRECATED_KEY, deprecated
from crowdtrack.analytics.vocabulary import AuthType, LoginIntent


class AuthEvents:
    """Authentication flows."""

    def track_login_tout(self, intent: LoginIntent) -> None:
        """Call when the login/signup tout is shown."""
        props = {"intent": intent.value, "context": intent.value}

        self.track("Application Login or Signup", {**props, DEPRECATED_KEY: True})
        self.track("Viewed Login Signup", props)

    def track_login_form_view(self) -> None:
        self.track("User Login", deprecated())
        self.track("Viewed Login")

    def track_login_success(self, auth_type: AuthType) -> None:
        self.track("Login", deprecated())
        self.track("Logged In", {"auth_type": auth_type.value})

    def track_login_error(self, auth_type: AuthType) -> None:
        self.track("Errored User Login", deprecated())
        self.track("Errored Login", {"auth_type": auth_type.value})

    def track_reset_password(self) -> None:
        self.track("Forgot Password View", deprecated())
        self.track("Viewed Forgot Password")

    def track_reset_password_success(self) -> None:
        self.track("Forgot Password Requested", deprecated())
        self.track("Requested Password Reset")

    def track_reset_password_error(self) -> None:
        self.track("Forgot Password Errored", deprecated())
        self.track("Errored Forgot Password")

    def track_facebook_confirmation(self) -> None:
        self.track("Facebook Confirm", deprecated())
        self.track("Viewed Facebook Signup")

    def track_tfa(self) -> None:
        self.track("Two-factor Authentication Confirm View", deprecated())
        self.track("Viewed Two-Factor Confirmation")

    def track_tfa_resend_code(self) -> None:
        self.track("Two-factor Authentication Resend Code", deprecated())
        self.track("Resent Two-Factor Code")

    def track_signup_error(self, auth_type: AuthType) -> None:
        """Call when signing up returned an error."""
        self.track("Errored User Signup", deprecated())
        self.track("Errored Signup", {"auth_type": auth_type.value})

    def track_signup_success(self, auth_type: AuthType) -> None:
        """Call when the user has signed up for a new account."""
        self.track("New User", deprecated())
        self.track("Signed Up", {"auth_type": auth_type.value})

    def track_signup_view(self) -> None:
        """Call once when the signup view loads."""
        self.track("User Signup", deprecated())
        self.track("Viewed Signup")
