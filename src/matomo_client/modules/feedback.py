"""
Feedback API.

Product feedback sent from a Matomo instance to the Matomo team.
"""

from matomo_client.modules.base import ModuleBase


class FeedbackModule(ModuleBase):
    """Façade for the ``Feedback`` namespace."""

    namespace = "Feedback"

    def send_feedback_for_feature(
        self, feature_name: str, like: str = "", choice: str = "", message: str = ""
    ):
        return self._call(
            "sendFeedbackForFeature",
            {"featureName": feature_name},
            {"like": like, "choice": choice, "message": message},
        )

    def send_feedback_for_survey(self, question: str, message: str = ""):
        return self._call("sendFeedbackForSurvey", {"question": question}, {"message": message})

    def update_feedback_reminder_date(self):
        return self._call("updateFeedbackReminderDate")
