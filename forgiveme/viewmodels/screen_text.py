"""User-facing copy shared by the Tk and web views."""

PROMPT = "I am sorry. Will you forgive me?"
YES_LABEL = "Yes, I forgot"
NO_LABEL = "No"
THANK_YOU = "Thank you ❤️"
DECLINED_TITLE = "I understand."
DECLINED_TEXT = (
    "If You Really Don't Want To Talk With You Think Im True Or Not, If You Think It "
    "Was True Then Break Your Promise And Come To Me Im Still Here For You."
)
