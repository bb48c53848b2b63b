import json
import logging
from enum import Enum
from typing import Any

from .errors import EncodingFailure

logger = logging.getLogger(__name__)


class InterruptionLevel(str, Enum):
    Passive = "passive"
    Active = "active"
    TimeSensitive = "time-sensitive"
    # Requires an approved entitlement from Apple.
    Critical = "critical"


class LiveActivityEvent(str, Enum):
    Start = "start"
    Update = "update"
    End = "end"


class PayloadAlert:
    def __init__(
        self,
        title: str | None = None,
        title_localized_key: str | None = None,
        title_localized_args: list[str] | None = None,
        subtitle: str | None = None,
        body: str | None = None,
        body_localized_key: str | None = None,
        body_localized_args: list[str] | None = None,
        action_localized_key: str | None = None,
        action: str | None = None,
        launch_image: str | None = None,
        summary_arg: str | None = None,
        summary_arg_count: int | None = None,
    ) -> None:
        self.title = title
        self.title_localized_key = title_localized_key
        self.title_localized_args = title_localized_args
        self.subtitle = subtitle
        self.body = body
        self.body_localized_key = body_localized_key
        self.body_localized_args = body_localized_args
        self.action_localized_key = action_localized_key
        self.action = action
        self.launch_image = launch_image
        self.summary_arg = summary_arg
        self.summary_arg_count = summary_arg_count

    def dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}

        if self.title:
            result["title"] = self.title
        if self.title_localized_key:
            result["title-loc-key"] = self.title_localized_key
        if self.title_localized_args:
            result["title-loc-args"] = self.title_localized_args

        if self.subtitle:
            result["subtitle"] = self.subtitle

        if self.body:
            result["body"] = self.body
        if self.body_localized_key:
            result["loc-key"] = self.body_localized_key
        if self.body_localized_args:
            result["loc-args"] = self.body_localized_args

        if self.action_localized_key:
            result["action-loc-key"] = self.action_localized_key
        if self.action:
            result["action"] = self.action

        if self.launch_image:
            result["launch-image"] = self.launch_image

        if self.summary_arg:
            result["summary-arg"] = self.summary_arg
        if self.summary_arg_count:
            result["summary-arg-count"] = self.summary_arg_count

        return result


class LiveActivityAps:
    """The ``aps`` dictionary of a Live Activity notification."""

    def __init__(self) -> None:
        self.alert: Any = None
        self.timestamp: int = 0
        self.event: str = ""
        self.content_state: Any = None
        self.attributes_type: str = ""
        self.attributes: Any = None
        self.dismissal_date: int = 0

    def dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}

        if self.alert is not None:
            if isinstance(self.alert, PayloadAlert):
                result["alert"] = self.alert.dict()
            else:
                result["alert"] = self.alert

        # Always sent, even when left at their defaults.
        result["timestamp"] = self.timestamp
        result["event"] = self.event
        result["content-state"] = self.content_state
        result["attributes-type"] = self.attributes_type

        if self.attributes is not None:
            result["attributes"] = self.attributes
        if self.dismissal_date:
            result["dismissal-date"] = self.dismissal_date

        return result


class Payload:
    """
    Builder for a Live Activity notification payload.

    Every setter modifies the payload in place and returns it, so calls can be
    chained::

        body = (
            Payload()
            .set_event(LiveActivityEvent.Update)
            .set_timestamp(1700000000)
            .set_content_state({"score": "2-1"})
            .set_alert_title("Goal!")
            .serialize()
        )

    Custom root keys share the document with ``"aps"``. Setting a custom key
    named ``"aps"`` replaces the Live Activity block in the output; the aps
    setters keep working on the builder's own block but no longer show up.
    """

    def __init__(self) -> None:
        self._aps = LiveActivityAps()
        self._content: dict[str, Any] = {"aps": self._aps}

    @property
    def aps(self) -> LiveActivityAps:
        return self._aps

    @property
    def alert(self) -> Any:
        return self._aps.alert

    # Root level

    def set_custom_field(self, key: str, value: Any) -> "Payload":
        self._content[key] = value
        return self

    def set_mdm(self, mdm: str) -> "Payload":
        """Set the Mobile Device Management (mdm) key at root level."""
        return self.set_custom_field("mdm", mdm)

    # aps

    def set_alert(self, alert: Any) -> "Payload":
        self._aps.alert = alert
        return self

    def set_timestamp(self, timestamp: int) -> "Payload":
        self._aps.timestamp = timestamp
        return self

    def set_event(self, event: str) -> "Payload":
        self._aps.event = event
        return self

    def set_content_state(self, content_state: Any) -> "Payload":
        self._aps.content_state = content_state
        return self

    def set_attributes_type(self, attributes_type: str) -> "Payload":
        self._aps.attributes_type = attributes_type
        return self

    def set_attributes(self) -> "Payload":
        """Send an empty ``attributes`` object."""
        self._aps.attributes = {}
        return self

    def set_dismissal_date(self, dismissal_date: int) -> "Payload":
        """Zero leaves ``dismissal-date`` out of the payload."""
        self._aps.dismissal_date = dismissal_date
        return self

    # aps.alert

    def _structured_alert(self) -> PayloadAlert:
        # A plain string (or any other value) is dropped the first time a
        # structured field is set; later calls keep using the same object.
        if not isinstance(self._aps.alert, PayloadAlert):
            self._aps.alert = PayloadAlert()
        return self._aps.alert

    def set_alert_title(self, title: str) -> "Payload":
        self._structured_alert().title = title
        return self

    def set_alert_title_localization_key(self, key: str) -> "Payload":
        self._structured_alert().title_localized_key = key
        return self

    def set_alert_title_localization_args(self, args: list[str]) -> "Payload":
        self._structured_alert().title_localized_args = args
        return self

    def set_alert_subtitle(self, subtitle: str) -> "Payload":
        self._structured_alert().subtitle = subtitle
        return self

    def set_alert_body(self, body: str) -> "Payload":
        self._structured_alert().body = body
        return self

    def set_alert_launch_image(self, image: str) -> "Payload":
        self._structured_alert().launch_image = image
        return self

    def set_alert_localization_args(self, args: list[str]) -> "Payload":
        self._structured_alert().body_localized_args = args
        return self

    def set_alert_localization_key(self, key: str) -> "Payload":
        self._structured_alert().body_localized_key = key
        return self

    def set_alert_action(self, action: str) -> "Payload":
        self._structured_alert().action = action
        return self

    def set_alert_action_localization_key(self, key: str) -> "Payload":
        self._structured_alert().action_localized_key = key
        return self

    def set_alert_summary_arg(self, summary_arg: str) -> "Payload":
        self._structured_alert().summary_arg = summary_arg
        return self

    def set_alert_summary_arg_count(self, count: int) -> "Payload":
        self._structured_alert().summary_arg_count = count
        return self

    # Output

    def dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, value in self._content.items():
            if isinstance(value, LiveActivityAps):
                result[key] = value.dict()
            else:
                result[key] = value
        return result

    def serialize(self, json_encoder: type | None = None) -> bytes:
        """
        Encode the payload as compact UTF-8 JSON.

        ``json_encoder`` is an optional ``json.JSONEncoder`` subclass for custom
        values the default encoder does not support.

        Raises EncodingFailure if any caller-supplied value cannot be encoded.
        """
        try:
            json_str = json.dumps(
                self.dict(),
                cls=json_encoder,
                ensure_ascii=False,
                allow_nan=False,
                separators=(",", ":"),
            )
        except (TypeError, ValueError, RecursionError) as e:
            logger.debug(f"Could not encode payload: {e}")
            raise EncodingFailure(str(e)) from e

        json_payload = json_str.encode("utf-8")
        logger.debug(f"Encoded payload of {len(json_payload)} bytes")
        return json_payload

    def __bytes__(self) -> bytes:
        return self.serialize()
