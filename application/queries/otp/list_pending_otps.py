"""列出待验证 OTP 的 Query"""

from dataclasses import dataclass


@dataclass
class ListPendingOtpsQuery:
    """列出待验证 OTP 的 Query

    调试用途的纯读取操作，返回当前所有未过期的凭证。

    Attributes:
        reveal_codes: 是否显示验证码明文，否则以 "HIDDEN" 代替
    """

    reveal_codes: bool = False
