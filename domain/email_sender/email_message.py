"""Email message value object - Domain layer."""

from dataclasses import dataclass
from typing import List, Optional

from domain.otp.address import is_valid_email


@dataclass(frozen=True)
class EmailMessage:
    """送信するメールを表す不変の値オブジェクト.

    Attributes:
        to: 送信先メールアドレスのリスト
        subject: 件名
        body: プレーンテキスト本文
        html_body: HTML 本文（オプション）
        from_address: 送信元（省略時は送信実装のデフォルト）
    """

    to: List[str]
    subject: str
    body: str
    html_body: Optional[str] = None
    from_address: Optional[str] = None

    def __post_init__(self):
        if not self.to:
            raise ValueError("受信者が指定されていません")
        if not self.subject:
            raise ValueError("件名が指定されていません")
        if not self.body:
            raise ValueError("本文が指定されていません")

        for address in self.to:
            if not is_valid_email(address):
                raise ValueError(f"無効なメールアドレス: {address}")
