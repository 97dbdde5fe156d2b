"""Email sender interface - Domain layer contract.

具体的な実装（SMTP, Console 等）は Infrastructure 層で提供されます。
"""

from abc import ABC, abstractmethod

from .email_message import EmailMessage


class IEmailSender(ABC):
    """メール送信インターフェース."""

    @abstractmethod
    def send(self, message: EmailMessage) -> bool:
        """メールを送信する.

        Args:
            message: 送信するメールメッセージ

        Returns:
            bool: 送信に成功した場合 True

        Raises:
            Exception: 送信中にエラーが発生した場合
        """
        pass

    @abstractmethod
    def validate_config(self) -> bool:
        """送信に必要な設定が揃っているかを返す."""
        pass
