from dataclasses import dataclass

SUBJECT = "Your shoes are almost ready 👟"
SIGNATURE = "Smart Shoe Locker System"


@dataclass(frozen=True)
class ReadySoonNotice:
    """Immutable near-completion email for a locker user."""

    recipient: str
    percent: int = 95

    def __post_init__(self) -> None:
        if not self.recipient or not self.recipient.strip():
            raise ValueError("Recipient email cannot be empty")
        if not 1 <= self.percent <= 100:
            raise ValueError("Percent must be between 1 and 100")

    @property
    def subject(self) -> str:
        return SUBJECT

    @property
    def html_body(self) -> str:
        return (
            '<div style="font-family: Arial, sans-serif; padding: 12px;">'
            "<h2>Your shoes are almost ready!</h2>"
            f"<p>The cleaning process is <b>{self.percent}%</b> complete.</p>"
            "<p>You can prepare to pick them up soon</p>"
            "<br>"
            f'<p style="font-size: 12px; color: #777;">{SIGNATURE}</p>'
            "</div>"
        )

    @property
    def text_body(self) -> str:
        return (
            "Your shoes are almost ready!\n"
            f"The cleaning process is {self.percent}% complete.\n"
            "You can prepare to pick them up soon.\n\n"
            f"{SIGNATURE}\n"
        )
