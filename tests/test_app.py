from unittest import mock

import pytest

from iotseclab.app import main, parse_args, run
from iotseclab.mqtt_comm import MqttError
from iotseclab.xor_cipher import xor_encrypt


class RecordingComm:
    def __init__(self, fail_after=None):
        self.published = []
        self.fail_after = fail_after

    def publish(self, topic, data):
        if self.fail_after is not None and len(self.published) >= self.fail_after:
            raise MqttError("boom")
        self.published.append((topic, data))


def test_defaults_match_source():
    args = parse_args([])
    assert args.client_id == "bitdog1"
    assert args.broker == "192.168.0.100"
    assert args.port == 1883
    assert args.topic == "escola/sala1/temperatura"
    assert args.message == "26.5"
    assert args.key == 42
    assert args.interval == 5.0
    assert args.count is None
    assert args.user is None and args.password is None


def test_parse_options():
    args = parse_args(["--key", "0x10", "--count", "3", "--interval", "0.5", "--topic", "a/b"])
    assert (args.key, args.count, args.interval, args.topic) == (16, 3, 0.5, "a/b")


@pytest.mark.parametrize("argv", [["--key", "256"], ["--key", "-1"], ["--count", "-2"], ["--interval", "-1"]])
def test_parse_rejects_bad_values(argv):
    with pytest.raises(SystemExit):
        parse_args(argv)


def test_run_publishes_count_times():
    comm = RecordingComm()
    assert run(comm, "t/x", b"\x01", 0, 3) == 3
    assert comm.published == [("t/x", b"\x01")] * 3


def test_run_zero_count():
    comm = RecordingComm()
    assert run(comm, "t", b"x", 0, 0) == 0
    assert comm.published == []


def test_run_sleeps_between_publications():
    comm = RecordingComm()
    with mock.patch("time.sleep") as sleep:
        sent = run(comm, "t", b"x", 5.0, 3)
    assert sent == 3
    assert comm.published == [("t", b"x")] * 3
    assert sleep.call_args_list == [mock.call(5.0), mock.call(5.0)]


def test_run_forever_stops_on_error():
    comm = RecordingComm(fail_after=4)
    with pytest.raises(MqttError):
        run(comm, "t", b"x", 0, None)
    assert len(comm.published) == 4


def test_main_publishes_encrypted_message():
    with mock.patch("paho.mqtt.client.Client") as client_cls:
        instance = client_cls.return_value
        instance.publish.return_value.rc = 0
        assert main(["--count", "2", "--interval", "0"]) == 0
    expected = xor_encrypt(b"26.5", 42)
    assert instance.publish.call_count == 2
    assert instance.publish.call_args.args == ("escola/sala1/temperatura", expected)
    assert xor_encrypt(instance.publish.call_args.args[1], 42) == b"26.5"
    instance.disconnect.assert_called_once_with()


def test_main_invalid_broker_returns_error():
    assert main(["--broker", "not-an-ip", "--count", "1"]) == 1


def test_main_publish_failure_returns_error():
    with mock.patch("paho.mqtt.client.Client") as client_cls:
        client_cls.return_value.publish.return_value.rc = 4
        assert main(["--count", "1", "--interval", "0"]) == 1