# iotseclab

A small lab tool for experimenting with IoT message security. It connects to
an MQTT broker and repeatedly publishes a sensor reading that has been
obfuscated with a single-byte XOR cipher. On the broker side you can see what
this "encrypted" traffic looks like, and how easily it can be reversed.

The XOR cipher is deliberately weak. It is meant for teaching and for basic
obfuscation. It does not protect real data.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
iotseclab --help
```

With no options the command does the following:

- connects as client `bitdog1` to a broker at `192.168.0.100`, port 1883, with no credentials;
- XORs the reading `26.5` with key 42;
- publishes the result to `escola/sala1/temperatura` every 5 seconds until it is interrupted.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--client-id` | `bitdog1` | MQTT client identifier |
| `--broker` | `192.168.0.100` | broker IPv4 address |
| `--port` | `1883` | broker port |
| `--user`, `--password` | none | credentials; the password is sent only when a user is given |
| `--topic` | `escola/sala1/temperatura` | topic to publish on |
| `--message` | `26.5` | reading to publish; it is UTF-8 encoded and then XORed |
| `--key` | `42` | XOR key from 0 to 255; prefixes such as `0x2a` are accepted |
| `--interval` | `5` | seconds between publications; must not be negative |
| `--count` | unlimited | number of publications; must not be negative |

Status messages are logged at INFO level:

- a successful connection;
- each publication that is sent.

If the command hits an MQTT error, it prints `error: ...` to standard error and exits with status 1. An interrupt with Ctrl-C ends it with status 0.

To watch the messages arrive, subscribe to the topic with any MQTT client that is connected to the same broker.

## Library use

```python
from iotseclab.xor_cipher import xor_encrypt
from iotseclab.mqtt_comm import MqttComm, MqttError

payload = xor_encrypt(b"26.5", 42)
assert xor_encrypt(payload, 42) == b"26.5"   # XOR is its own inverse

try:
    with MqttComm("bitdog1", "192.168.0.100", None, None, 1883) as comm:
        comm.publish("escola/sala1/temperatura", payload)
except MqttError as err:
    print(f"MQTT failure: {err}")
```

### `xor_encrypt(data, key)`

Returns `data` with every byte XORed with the one-byte `key`. The same call both encrypts and decrypts.

- A key outside 0–255 raises `ValueError`.
- A key that is not an integer raises `TypeError`.

### `MqttComm(client_id, broker_ip, user, password, port)`

Wraps a connection to a broker.

- The broker must be given as an IPv4 address. Any other value raises `MqttError`.
- `connect()` opens the connection, limited to 5 in-flight messages with a 60-second keepalive, and starts the network loop in the background. A broker that cannot be reached raises `MqttError`.
- `publish(topic, data)` sends a payload with QoS 0 and no retain flag. It raises `MqttError` if the client is not connected or the publish is refused.
- `close()` stops the loop and disconnects.
- Used as a context manager, it connects on entry and closes on exit.
- The `connected` attribute shows whether the broker accepted the connection. A refusal from the broker is logged; it is not raised.

### `iotseclab.app.run(comm, topic, payload, interval, count)`

Runs the publish loop that the command uses.

- It publishes `payload` `count` times, or forever when `count` is `None`.
- It waits `interval` seconds between publications.
- It returns the number of messages sent.

## What it does not do

The package only publishes:

- It does not subscribe to topics or receive messages.
- It has no command to decode payloads; use `xor_encrypt` with the same key for that.
- It does not set up the network link; the machine it runs on must already be able to reach the broker.