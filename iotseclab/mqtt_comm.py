"""MQTT publishing client for the IoT security lab."""

from __future__ import annotations

import ipaddress
import logging

import paho.mqtt.client as mqtt

log = logging.getLogger(__name__)

DEFAULT_PORT = 1883
MAX_IN_FLIGHT = 5
KEEPALIVE = 60


class MqttError(Exception):
    """Raised when an MQTT operation fails."""


def _new_client(client_id: str) -> mqtt.Client:
    api_version = getattr(mqtt, "CallbackAPIVersion", None)
    if api_version is not None:
        return mqtt.Client(api_version.VERSION2, client_id=client_id)
    return mqtt.Client(client_id=client_id)


def _code(value) -> int:
    return int(getattr(value, "value", value))


class MqttComm:
    """A connection to an MQTT broker that publishes with QoS 0."""

    def __init__(
        self,
        client_id: str,
        broker_ip: str,
        user: str | None = None,
        password: str | None = None,
        port: int = DEFAULT_PORT,
    ) -> None:
        try:
            self.broker_ip = str(ipaddress.IPv4Address(broker_ip))
        except (ipaddress.AddressValueError, ValueError) as exc:
            raise MqttError(f"invalid broker IP: {broker_ip!r}") from exc
        self.client_id = client_id
        self.user = user
        self.password = password
        self.port = port
        self.connected = False
        self._client: mqtt.Client | None = None

    def connect(self) -> None:
        """Open the connection to the broker and start the network loop."""
        if self._client is not None:
            return
        client = _new_client(self.client_id)
        if self.user is not None:
            client.username_pw_set(self.user, self.password)
        client.max_inflight_messages_set(MAX_IN_FLIGHT)
        client.on_connect = self._on_connect
        client.on_publish = self._on_publish
        try:
            client.connect(self.broker_ip, self.port, keepalive=KEEPALIVE)
        except OSError as exc:
            raise MqttError(
                f"could not connect to {self.broker_ip}:{self.port}: {exc}"
            ) from exc
        client.loop_start()
        self._client = client

    def publish(self, topic: str, data: bytes) -> None:
        """Publish ``data`` on ``topic`` with QoS 0 and no retain flag."""
        if self._client is None:
            raise MqttError("client is not connected")
        info = self._client.publish(topic, bytes(data), qos=0, retain=False)
        if info.rc != mqtt.MQTT_ERR_SUCCESS:
            raise MqttError(f"publish failed: {info.rc}")

    def close(self) -> None:
        """Stop the network loop and disconnect from the broker."""
        client, self._client = self._client, None
        if client is None:
            return
        client.loop_stop()
        client.disconnect()
        self.connected = False

    def __enter__(self) -> "MqttComm":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _on_connect(self, client, userdata, flags, reason_code, properties=None):
        code = _code(reason_code)
        self.connected = code == 0
        if self.connected:
            log.info("Connected to MQTT broker")
        else:
            log.error("Failed to connect to broker, code: %d", code)

    def _on_publish(self, client, userdata, mid, reason_code=0, properties=None):
        code = _code(reason_code)
        if code == 0:
            log.info("MQTT publish sent")
        else:
            log.error("MQTT publish error: %d", code)