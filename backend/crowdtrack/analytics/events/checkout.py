"""Pledge, checkout, Apple Pay and payment method events."""

from typing import Optional

from crowdtrack.analytics.context import reward_properties
from crowdtrack.analytics.properties import Properties, deprecated, merge
from crowdtrack.analytics.vocabulary import (
    CheckoutContext,
    CheckoutPageContext,
    ClickedRewardPledgeButtonType,
    ErroredRewardPledgeButtonClickType,
    ManagePledgeMenuCTAType,
    PaymentMethod,
    PledgeContext,
    PledgeStateCTAType,
)
from crowdtrack.schemas.project import Project
from crowdtrack.schemas.reward import Backing, Reward

_PLEDGE_CTA_EVENTS = {
    PledgeStateCTAType.FIX: "Fix Pledge Button Clicked",
    PledgeStateCTAType.PLEDGE: "Back this Project Button Clicked",
    PledgeStateCTAType.MANAGE: "Manage Pledge Button Clicked",
    PledgeStateCTAType.SEE_REWARDS: "See Rewards Button Clicked",
    PledgeStateCTAType.VIEW_BACKING: "View Your Pledge Button Clicked",
    PledgeStateCTAType.VIEW_REWARDS: "View Rewards Button Clicked",
    PledgeStateCTAType.VIEW_YOUR_REWARDS: "View Your Rewards Button Clicked",
}


class CheckoutEvents:
    """Everything between the pledge button and the thanks page."""

    def _pledge_properties(
        self, project: Project, reward: Reward, pledge_context: PledgeContext
    ) -> Properties:
        return merge(
            self._project_properties(project),
            reward_properties(reward),
            {"pledge_context": pledge_context.value},
        )

    # ------------------------------------------------------------------
    # Project page call-to-actions
    # ------------------------------------------------------------------

    def track_pledge_cta_button_clicked(
        self, state_type: PledgeStateCTAType, project: Project, screen: CheckoutContext
    ) -> None:
        props = merge(self._project_properties(project), {"screen": screen.value})

        self.track(_PLEDGE_CTA_EVENTS[state_type], props)

    def track_cancel_pledge_button_clicked(self, project: Project, backing: Backing) -> None:
        props = merge(self._project_properties(project), {"pledge_total": backing.amount})

        self.track("Cancel Pledge Button Clicked", props)

    def track_update_payment_method_button(self, project: Project, pledge_amount: float) -> None:
        props = merge(self._project_properties(project), {"pledge_total": pledge_amount})

        self.track("Update Payment Method Button Clicked", props)

    def track_update_pledge_button_clicked(self, project: Project, pledge_amount: float) -> None:
        props = merge(self._project_properties(project), {"pledge_total": pledge_amount})

        self.track("Update Pledge Button Clicked", props)

    def track_manage_pledge_option_clicked(
        self, project: Project, manage_pledge_menu_cta: ManagePledgeMenuCTAType
    ) -> None:
        props = merge(self._project_properties(project), {"cta": manage_pledge_menu_cta.value})

        self.track("Manage Pledge Option Clicked", props)

    def track_select_reward_button_clicked(
        self,
        project: Project,
        reward: Optional[Reward],
        backing: Optional[Backing],
        screen: CheckoutContext,
    ) -> None:
        props = merge(
            self._project_properties(project),
            {
                "screen": screen.value,
                "backer_reward_minimum": reward.minimum if reward is not None else None,
                "pledge_total": backing.amount if backing is not None else None,
            },
        )

        self.track("Select Reward Button Clicked", props)

    def track_pledge_screen_viewed(self, project: Project) -> None:
        self.track("Pledge Screen Viewed", self._project_properties(project))

    def track_pledge_button_clicked(self, project: Project, pledge_amount: float) -> None:
        props = merge(self._project_properties(project), {"pledge_total": pledge_amount})

        self.track("Pledge Button Clicked", props)

    def track_add_new_card_button_clicked(self, project: Project) -> None:
        self.track("Add New Card Button Clicked", self._project_properties(project))

    # ------------------------------------------------------------------
    # Reward selection
    # ------------------------------------------------------------------

    def track_checkout_cancel(
        self, project: Project, reward: Reward, pledge_context: PledgeContext
    ) -> None:
        props = self._pledge_properties(project, reward, pledge_context)

        self.track("Checkout Cancel", deprecated(props))
        self.track("Canceled Checkout", props)

    def track_clicked_reward_pledge_button(
        self,
        project: Project,
        reward: Reward,
        button_type: ClickedRewardPledgeButtonType,
        page_context: CheckoutPageContext,
        pledge_context: PledgeContext,
    ) -> None:
        props = merge(
            self._pledge_properties(project, reward, pledge_context),
            {"type": button_type.value, "context": page_context.value},
        )

        self.track("Clicked Reward Pledge Button", props)

    def track_errored_reward_pledge_button_click(
        self,
        project: Project,
        reward: Reward,
        error_text: str,
        error_type: ErroredRewardPledgeButtonClickType,
        payment_method: Optional[PaymentMethod],
        page_context: CheckoutPageContext,
        pledge_context: PledgeContext,
    ) -> None:
        """Call when a reward pledge button press fails validation."""
        props = merge(
            self._pledge_properties(project, reward, pledge_context),
            {
                "error_text": error_text,
                "type": error_type.value,
                "context": page_context.value,
                "payment_method": payment_method.value if payment_method is not None else None,
            },
        )

        self.track("Errored Reward Pledge Button Click", props)

    def track_changed_pledge_amount(
        self, project: Project, reward: Reward, pledge_context: PledgeContext
    ) -> None:
        props = self._pledge_properties(project, reward, pledge_context)

        self.track("Checkout Amount Changed", deprecated(props))
        self.track("Changed Pledge Amount", props)

    def track_selected_shipping_destination(
        self, project: Project, reward: Reward, pledge_context: PledgeContext
    ) -> None:
        props = self._pledge_properties(project, reward, pledge_context)

        self.track("Checkout Location Changed", deprecated(props))
        self.track("Selected Shipping Destination", props)

    def track_selected_reward(
        self, project: Project, reward: Reward, pledge_context: PledgeContext
    ) -> None:
        props = self._pledge_properties(project, reward, pledge_context)

        self.track("Reward Checkout", deprecated(props))
        self.track("Selected Reward", props)

    def track_closed_reward(
        self, project: Project, reward: Reward, pledge_context: PledgeContext
    ) -> None:
        self.track("Closed Reward", self._pledge_properties(project, reward, pledge_context))

    def track_expanded_reward_description(
        self, reward: Reward, project: Project, pledge_context: PledgeContext
    ) -> None:
        self.track(
            "Expanded Reward Description", self._pledge_properties(project, reward, pledge_context)
        )

    def track_expanded_unavailable_reward(
        self, reward: Reward, project: Project, pledge_context: PledgeContext
    ) -> None:
        self.track(
            "Expanded Unavailable Reward", self._pledge_properties(project, reward, pledge_context)
        )

    # ------------------------------------------------------------------
    # Apple Pay
    # ------------------------------------------------------------------

    def track_show_apple_pay_sheet(
        self, project: Project, reward: Reward, pledge_context: PledgeContext
    ) -> None:
        props = self._pledge_properties(project, reward, pledge_context)

        self.track("Apple Pay Show Sheet", deprecated(props))
        self.track("Showed Apple Pay Sheet", props)

    def track_apple_pay_authorized_payment(
        self, project: Project, reward: Reward, pledge_context: PledgeContext
    ) -> None:
        props = self._pledge_properties(project, reward, pledge_context)

        self.track("Apple Pay Authorized", deprecated(props))
        self.track("Authorized Apple Pay", props)

    def track_stripe_token_created_for_apple_pay(
        self, project: Project, reward: Reward, pledge_context: PledgeContext
    ) -> None:
        props = self._pledge_properties(project, reward, pledge_context)

        self.track("Apple Pay Stripe Token Created", deprecated(props))
        self.track("Created Apple Pay Stripe Token", props)

    def track_stripe_token_errored_for_apple_pay(
        self, project: Project, reward: Reward, pledge_context: PledgeContext
    ) -> None:
        props = self._pledge_properties(project, reward, pledge_context)

        self.track("Apple Pay Stripe Token Errored", deprecated(props))
        self.track("Errored Apple Pay Stripe Token", props)

    def track_apple_pay_finished(
        self, project: Project, reward: Reward, pledge_context: PledgeContext
    ) -> None:
        # Deprecated only; there is no current-vocabulary counterpart.
        self.track(
            "Apple Pay Finished", deprecated(self._pledge_properties(project, reward, pledge_context))
        )

    def track_apple_pay_sheet_canceled(
        self, project: Project, reward: Reward, pledge_context: PledgeContext
    ) -> None:
        props = self._pledge_properties(project, reward, pledge_context)

        self.track("Apple Pay Canceled", deprecated(props))
        self.track("Canceled Apple Pay", props)

    # ------------------------------------------------------------------
    # After checkout
    # ------------------------------------------------------------------

    def track_checkout_finish_jump_to_discovery(self, project: Project) -> None:
        self.track("Checkout Finished Discover More", self._project_properties(project))

    def track_checkout_finish_jump_to_project(self, project: Project) -> None:
        self.track("Checkout Finished Discover Open Project", self._project_properties(project))

    def track_triggered_app_store_rating_dialog(self, project: Project) -> None:
        self.track("Triggered App Store Rating Dialog", self._project_properties(project))

    def track_viewed_pledge(self, project: Project) -> None:
        """Call when the backer's pledge info screen is shown."""
        self.track("Viewed Pledge Info", self._project_properties(project))
        self.track("Modal Dialog View", deprecated({"modal_class": "backer_info"}))

    # ------------------------------------------------------------------
    # Payment methods
    # ------------------------------------------------------------------

    def track_viewed_payment_methods(self) -> None:
        self.track("Viewed Payment Methods")

    def track_viewed_add_new_card(self) -> None:
        self.track("Viewed Add New Card")

    def track_deleted_payment_method(self) -> None:
        self.track("Deleted Payment Method")

    def track_delete_payment_method_error(self) -> None:
        self.track("Errored Delete Payment Method")

    def track_saved_payment_method(self) -> None:
        self.track("Saved Payment Method")

    def track_failed_payment_method_creation(self) -> None:
        self.track("Failed Payment Method Creation")
