from pythonosc.udp_client import SimpleUDPClient
import time, math
from pump import PUMP_ADDR, DEFLATE_ADDR

# IP/port of the relay
RELAY_IP, RELAY_PORT = "127.0.0.1", 9009

def main():
    client = SimpleUDPClient(RELAY_IP, RELAY_PORT)

    # start half deflated so the first strokes drain it
    client.send_message(DEFLATE_ADDR, 0.5)

    t0 = time.time()
    while True:
        t = time.time() - t0
        # one pump stroke every 2s
        stretch = 0.5 + 0.5*math.sin(2*math.pi*0.5*t)

        client.send_message(PUMP_ADDR, float(stretch))

        print(f"sent stretch={stretch:.2f}", end="\r")
        time.sleep(0.05)  # 20Hz demo

if __name__ == "__main__":
    main()
