from urllib.robotparser import RobotFileParser


def parse_policy(policy_text: str) -> RobotFileParser:
    parser = RobotFileParser()
    # parse() also marks the parser as read; can_fetch() denies everything before that
    parser.parse((policy_text or "").splitlines())
    return parser


def agent_allowed(policy_text: str, user_agent: str, url: str) -> bool:
    """Return True when `policy_text` lets `user_agent` fetch `url`.

    Empty policy text allows everything. Within a group the first rule whose
    path matches decides (`RobotFileParser` semantics), so an `Allow` listed
    after a broader `Disallow` has no effect. Google's parser would pick the
    longest match instead.
    """
    if not policy_text or not policy_text.strip():
        return True
    return parse_policy(policy_text).can_fetch(user_agent, url)
