"""
Notification Service（邮件通知服务）

职责：
- 行程创建后通知创建者确认行程
- 行程确认后（或确认后的新邀请）向参与者发送邀请确认邮件

通过 SMTP 发送；SMTP_USER / SMTP_PASSWORD 未配置或 NOTIFY_ENABLED=false 时直接跳过。
本服务在后台任务中调用，调用方不关心结果，所以这里吞掉发送异常并记录日志，
返回值只表示是否真的发出了邮件。
"""

from dataclasses import dataclass
from datetime import datetime
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
import logging
import smtplib

from .. import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TripNotice:
    """发邮件所需的行程快照（后台任务运行时请求的数据库会话已关闭，不能再持有 ORM 对象）"""
    code: str
    destination: str
    starts_at: datetime
    ends_at: datetime
    owner_name: str
    owner_email: str

    @classmethod
    def from_trip(cls, trip) -> "TripNotice":
        return cls(
            code=trip.code,
            destination=trip.destination,
            starts_at=trip.starts_at,
            ends_at=trip.ends_at,
            owner_name=trip.owner_name,
            owner_email=trip.owner_email,
        )

    @property
    def date_range(self) -> str:
        return f"{self.starts_at:%Y-%m-%d} ~ {self.ends_at:%Y-%m-%d}"


class NotificationService:
    """邮件通知服务"""

    def _from_address(self) -> str:
        if config.MAIL_FROM:
            return config.MAIL_FROM
        if config.SMTP_USER:
            return f"Trip Planner <{config.SMTP_USER}>"
        return "Trip Planner <noreply@localhost>"

    def _send(self, to_email: str, subject: str, body: str) -> bool:
        to_email = (to_email or "").strip()
        if not to_email:
            return False
        if not config.NOTIFY_ENABLED:
            logger.debug("[notify][disabled] to=%s subject=%s", to_email, subject)
            return False
        if not config.SMTP_USER or not config.SMTP_PASSWORD:
            logger.debug("[notify][skip] SMTP_USER or SMTP_PASSWORD not set; to=%s", to_email)
            return False

        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = self._from_address()
        msg["To"] = to_email
        msg.attach(MIMEText(body, "plain", "utf-8"))
        msg.attach(MIMEText(f"<pre style='font-family:sans-serif'>{body}</pre>", "html", "utf-8"))
        try:
            with smtplib.SMTP(config.SMTP_HOST, config.SMTP_PORT, timeout=config.SMTP_TIMEOUT) as server:
                server.starttls()
                server.login(config.SMTP_USER, config.SMTP_PASSWORD)
                server.sendmail(config.SMTP_USER, [to_email], msg.as_string())
        except (smtplib.SMTPException, OSError):
            logger.exception("[notify][error] to=%s subject=%s", to_email, subject)
            return False
        logger.info("[notify][sent] to=%s subject=%s", to_email, subject)
        return True

    def send_trip_created(self, email: str, trip: TripNotice) -> bool:
        """通知行程创建者确认行程"""
        link = f"{config.APP_BASE_URL}/trips/{trip.code}/confirm"
        body = "\n".join([
            f"Hi {trip.owner_name},",
            "",
            f"Your trip to {trip.destination} ({trip.date_range}) has been created.",
            "Confirm it to send the invitations to everyone on the guest list:",
            link,
        ])
        return self._send(email, f"Confirm your trip to {trip.destination}", body)

    def send_invitation(self, email: str, trip: TripNotice) -> bool:
        """邀请参与者确认参加已确认的行程"""
        link = f"{config.APP_BASE_URL}/trips/{trip.code}"
        body = "\n".join([
            "Hi,",
            "",
            f"{trip.owner_name} invited you to a trip to {trip.destination} ({trip.date_range}).",
            "Open the trip to confirm your presence:",
            link,
        ])
        return self._send(email, f"You're invited to {trip.destination}", body)


notification_service = NotificationService()
