"""
Canned replies returned without calling OpenAI.
"""

IDENTITY_QUERIES = (
    "من انت؟",
    "وش اسمك",
    "وش اسمك؟",
    "ما اسمك؟",
    "ما اسمك",
    "ايش اسمك؟",
    "ايش اسمك",
    "عرف عن اسمك؟",
    "عرف عن اسمك",
    "what is your name",
    "your name?",
    "your name",
    "ممكن نتعرف؟",
    "ممكن نتعرف",
    "name?",
    "name",
    "who are you",
)

IDENTITY_REPLY = "اسمي اوليفيا .. وانا بوت ذكاء اصطناعي و مساعدك وقت حاجتك ..."

DEVELOPER_QUERIES = (
    "من هو مطورك",
    "من هو مطورك؟",
    "من مطورك؟",
    "من مطورك",
    "من هو المطور؟",
    "من هو المطور",
    "المطور؟",
    "المطور",
)

DEVELOPER_REPLY = "مطوري هو فيصل العتيبي"
