from pythonosc.dispatcher import Dispatcher
from pythonosc.osc_server import BlockingOSCUDPServer
from pump import BASE_PARAM

def on_pooltoy(address, *args):
    print(f"[POOLTOY] {address} -> {args}")

def on_pump(address, *args):
    print(f"[PUMP]    {address} -> {args}")

def main():
    disp = Dispatcher()
    disp.map(BASE_PARAM + "Pooltoy/*", on_pooltoy)
    disp.map(BASE_PARAM + "Pump/*",    on_pump)

    # stands in for the avatar the relay sends to
    ip = "127.0.0.1"
    port = 9000
    print(f"Listening on {ip}:{port} ...")
    server = BlockingOSCUDPServer((ip, port), disp)
    server.serve_forever()

if __name__ == "__main__":
    main()
