# pump.py
BASE_PARAM = "/avatar/parameters/"

PUMP_ADDR        = BASE_PARAM + "Pump/Pump_Stretch"
DEFLATE_ADDR     = BASE_PARAM + "Pooltoy/Deflate"
INFLATE_ADDR     = BASE_PARAM + "Pooltoy/Inflate"
OVERINFLATE_ADDR = BASE_PARAM + "Pooltoy/Overinflate"
TRIGGER_ADDR     = BASE_PARAM + "Pump/Deltapump_Inflating"

DEAD_ZONE = 0.01
PUMP_MODIFIER = 0.05


class PumpState:
    def __init__(self, deflate=0.0, inflate=0.0, overinflate=0.0, last_pump=0.0):
        self.deflate = deflate
        self.inflate = inflate
        self.overinflate = overinflate
        self.last_pump = last_pump

    def __repr__(self):
        return (f"PumpState(deflate={self.deflate}, inflate={self.inflate}, "
                f"overinflate={self.overinflate}, last_pump={self.last_pump})")


def pump_update(pump_position, last_pump_position, deflate, inflate, overinflate,
                pump_modifier=PUMP_MODIFIER):
    """
    New (deflate, inflate, overinflate) for a pump move, or None inside the dead zone.
    Stretching first drains deflate, then fills inflate; past 1.0 the whole
    inflate delta also goes into overinflate.
    """
    pump_delta = abs(pump_position - last_pump_position)
    if pump_delta < DEAD_ZONE:
        return None

    inflate_delta = pump_delta * pump_modifier

    new_deflate = deflate
    new_overinflate = overinflate

    if deflate > 0.0:
        new_deflate = max(0.0, deflate - inflate_delta)
        # uses deflate before the drain
        inflate_delta = max(0.0, inflate_delta - deflate)

    new_inflate = inflate + inflate_delta

    if new_inflate > 1.0:
        new_inflate = 1.0
        new_overinflate = min(1.0, overinflate + inflate_delta)

    print("\nPUMP UPDATE")
    print(f"[Pump] Stretch delta: {pump_delta}")
    print(f"[Pump] Inflate delta: {inflate_delta}")
    print(f"[Pump] Deflate: {new_deflate}")
    print(f"[Pump] Inflate: {new_inflate}")
    print(f"[Pump] Overinflate: {new_overinflate}")

    return new_deflate, new_inflate, new_overinflate


def route(address, args, state, pump_modifier=PUMP_MODIFIER):
    """
    Apply one incoming OSC message to ``state``.

    Returns the (address, value) pairs to send back to the avatar, in send
    order: empty unless a pump move got past the dead zone.
    """
    if not args or not isinstance(args[0], float):
        return []
    val = args[0]

    if address == DEFLATE_ADDR:
        print(f"Deflate value: {val}")
        state.deflate = val
    elif address == INFLATE_ADDR:
        print(f"Inflate value: {val}")
        state.inflate = val
    elif address == OVERINFLATE_ADDR:
        print(f"Overinflate value: {val}")
        state.overinflate = val
    elif address == PUMP_ADDR:
        print(f"Pump value: {val}")
        result = pump_update(val, state.last_pump, state.deflate, state.inflate,
                             state.overinflate, pump_modifier)
        state.last_pump = val
        if result is None:
            return []
        state.deflate, state.inflate, state.overinflate = result
        return [
            (DEFLATE_ADDR,     state.deflate),
            (INFLATE_ADDR,     state.inflate),
            (OVERINFLATE_ADDR, state.overinflate),
            (TRIGGER_ADDR,     True),
        ]
    return []
