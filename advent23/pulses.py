"""Pulse propagation through a network of flip-flops and conjunctions."""

from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass
from enum import Enum
from math import prod

BUTTON_MODULE = "button"
BROADCASTER_MODULE = "broadcaster"


class Pulse(Enum):
    """Signal level carried by a pulse."""

    HIGH = "high"
    LOW = "low"


class ModuleType(Enum):
    """Kind of communication module."""

    BROADCASTER = "broadcaster"
    FLIP_FLOP = "flip-flop"
    CONJUNCTION = "conjunction"

    @classmethod
    def parse(cls, text: str) -> tuple[ModuleType, str]:
        """Split a declaration such as ``%a`` into its type and name."""
        if text == BROADCASTER_MODULE:
            return cls.BROADCASTER, text
        if text.startswith("%"):
            return cls.FLIP_FLOP, text[1:]
        if text.startswith("&"):
            return cls.CONJUNCTION, text[1:]
        raise ValueError(f"unknown module type {text!r}")


@dataclass(frozen=True)
class Module:
    """A module and the names of the modules it sends pulses to."""

    module_type: ModuleType
    targets: tuple[str, ...]

    @property
    def is_flipflop(self) -> bool:
        return self.module_type is ModuleType.FLIP_FLOP

    @property
    def is_conjunction(self) -> bool:
        return self.module_type is ModuleType.CONJUNCTION


class ModuleNetwork:
    """Live state of a module network, with per-target pulse counts."""

    def __init__(self, modules: dict[str, Module]) -> None:
        self.modules = dict(modules)
        self.flip_flops: dict[str, bool] = {
            name: False for name, module in self.modules.items() if module.is_flipflop
        }
        self.conjunctions: dict[str, dict[str, Pulse]] = {}
        for name, module in self.modules.items():
            for target in module.targets:
                receiver = self.modules.get(target)
                if receiver is not None and receiver.is_conjunction:
                    self.conjunctions.setdefault(target, {})[name] = Pulse.LOW
        self.low_pulses: Counter[str] = Counter()
        self.high_pulses: Counter[str] = Counter()

    def _respond(self, sender: str, receiver: str, pulse: Pulse) -> Pulse | None:
        module = self.modules[receiver]
        if module.module_type is ModuleType.BROADCASTER:
            return pulse
        if module.module_type is ModuleType.FLIP_FLOP:
            if pulse is not Pulse.LOW:
                return None
            state = not self.flip_flops.get(receiver, False)
            self.flip_flops[receiver] = state
            return Pulse.HIGH if state else Pulse.LOW
        memory = self.conjunctions.setdefault(receiver, {})
        memory[sender] = pulse
        if all(remembered is Pulse.HIGH for remembered in memory.values()):
            return Pulse.LOW
        return Pulse.HIGH

    def press_button(self) -> None:
        """Send one low pulse to the broadcaster and process until the network is quiet."""
        self.low_pulses[BROADCASTER_MODULE] += 1
        queue = deque([(BUTTON_MODULE, BROADCASTER_MODULE, Pulse.LOW)])
        while queue:
            sender, receiver, pulse = queue.popleft()
            if receiver not in self.modules:
                continue
            outgoing = self._respond(sender, receiver, pulse)
            if outgoing is None:
                continue
            counts = self.high_pulses if outgoing is Pulse.HIGH else self.low_pulses
            for target in self.modules[receiver].targets:
                counts[target] += 1
                queue.append((receiver, target, outgoing))


def parse_modules(text: str) -> dict[str, Module]:
    """Parse lines such as ``%a -> b, c`` into modules keyed by name."""
    modules = {}
    for line in text.splitlines():
        lhs, sep, rhs = line.partition(" -> ")
        if not sep:
            raise ValueError(f"malformed module line {line!r}")
        module_type, name = ModuleType.parse(lhs)
        modules[name] = Module(module_type, tuple(rhs.split(", ")))
    return modules


def targets_conjunction(modules: dict[str, Module], name: str) -> bool:
    """Whether the named module sends to any conjunction."""
    return any(modules[target].is_conjunction for target in modules[name].targets)


def to_graphviz(modules: dict[str, Module]) -> str:
    """Graphviz ``dot`` description of the network."""
    lines = ["digraph {"]
    for name, module in modules.items():
        if module.module_type is ModuleType.BROADCASTER:
            lines.append(f"  {name} [shape=Mdiamond]")
        elif module.module_type is ModuleType.FLIP_FLOP:
            lines.append(f"  {name} [shape=box]")
        elif len(module.targets) == 1:
            lines.append(f"  {name} [shape=diamond color=red]")
        else:
            lines.append(f"  {name} [shape=circle color=blue]")
        lines.extend(f"  {name} -> {target}" for target in module.targets)
    lines.append("}")
    return "\n".join(lines) + "\n"


def part1(text: str, presses: int = 1000) -> int:
    """Product of high and low pulse totals after pressing the button ``presses`` times."""
    network = ModuleNetwork(parse_modules(text))
    for _ in range(presses):
        network.press_button()
    return sum(network.high_pulses.values()) * sum(network.low_pulses.values())


def part2(text: str) -> int:
    """Product of the periods encoded by the flip-flop chains hanging off the broadcaster.

    Only meaningful for networks built from flip-flop chains feeding conjunctions.
    """
    modules = parse_modules(text)
    periods = []
    for head in modules[BROADCASTER_MODULE].targets:
        chain = [head]
        current = head
        while True:
            following = next(
                (t for t in modules[current].targets if modules[t].is_flipflop), None
            )
            if following is None:
                break
            chain.append(following)
            current = following
        period = 0
        for name in reversed(chain):
            period = (period << 1) + (1 if targets_conjunction(modules, name) else 0)
        periods.append(period)
    return prod(periods)