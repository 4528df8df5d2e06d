# pump_relay.py
import argparse
import sys
from pythonosc.dispatcher import Dispatcher
from pythonosc.osc_server import BlockingOSCUDPServer
from pythonosc.udp_client import SimpleUDPClient
from pump import PumpState, PUMP_MODIFIER, route


LISTEN_ADDR = "127.0.0.1:9009"
TARGET_ADDR = "127.0.0.1:9000"
VERSION = "0.1.0"


def parse_address(text):
    host, sep, port = text.rpartition(":")
    if not sep or not host:
        raise argparse.ArgumentTypeError(f"expected host:port, got {text!r}")
    try:
        port = int(port)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port in {text!r}")
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range in {text!r}")
    return host, port


def format_address(addr):
    return f"{addr[0]}:{addr[1]}"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Turn avatar pump stretch into deflate/inflate/overinflate parameters over OSC.")
    parser.add_argument("-a", "--address", type=parse_address, default=LISTEN_ADDR,
                        help="Address to listen to (default: %(default)s)")
    parser.add_argument("-t", "--target-address", type=parse_address, default=TARGET_ADDR,
                        help="Address to send to (default: %(default)s)")
    parser.add_argument("-p", "--pump-modifier", type=float, default=PUMP_MODIFIER,
                        help="Pump inflate modifier (default: %(default)s)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser.parse_args(argv)


class ReceiveError(Exception):
    pass


class RelayServer(BlockingOSCUDPServer):
    """
    Blocking OSC server whose receive errors end serve_forever instead of
    being dropped by socketserver.
    """

    def get_request(self):
        try:
            return super().get_request()
        except OSError as e:
            print(f"[Relay] Error receiving from socket: {e}")
            raise ReceiveError(e) from e


class PumpRelay:
    """
    Routes every incoming OSC message through ``route`` and forwards the
    resulting parameter updates to the avatar.
    """

    def __init__(self, client, pump_modifier=PUMP_MODIFIER, state=None):
        self.client = client
        self.pump_modifier = pump_modifier
        self.state = state if state is not None else PumpState()

    def handle_message(self, address, *args):
        for out_addr, value in route(address, args, self.state, self.pump_modifier):
            try:
                self.client.send_message(out_addr, value)
            except OSError as e:
                print(f"[Relay] Error sending {out_addr}: {e}")

    def dispatcher(self):
        disp = Dispatcher()
        disp.set_default_handler(self.handle_message)
        return disp


def main(argv=None):
    args = parse_args(argv)

    client = SimpleUDPClient(*args.target_address)
    relay = PumpRelay(client, args.pump_modifier)

    try:
        server = RelayServer(args.address, relay.dispatcher())
    except OSError as e:
        print(f"[Relay] Cannot bind {format_address(args.address)}: {e}")
        return 1

    print(f"Listening to {format_address(args.address)}")
    print(f"Sending to {format_address(args.target_address)}")

    try:
        server.serve_forever()
    except KeyboardInterrupt:
        print("\nStopping...")
    except ReceiveError:
        return 1
    except OSError as e:
        print(f"[Relay] Error receiving from socket: {e}")
        return 1
    finally:
        server.server_close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
