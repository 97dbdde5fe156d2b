"""Notification dispatcher interface - Domain layer contract.

コード配信の具体的な実装（メール等）は Infrastructure 層で提供されます。
"""

from abc import ABC, abstractmethod


class NotificationDispatcher(ABC):
    """発行したコードを受信者に届けるインターフェース."""

    @abstractmethod
    def send(self, address: str, code: int) -> None:
        """コードを ``address`` に送信する.

        Args:
            address: 送信先メールアドレス
            code: 発行したコード

        Raises:
            Exception: トランスポート層で送信に失敗した場合
        """
        pass
