"""Test-only Hack CPU emulator, executes assembled translator output."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import TypeAlias

import pytest

from libhackkit.assembler import assemble_source
from libhackkit.vm import translate_source

WORD_MASK = 0xFFFF
SIGN_BIT = 0x8000
RAM_SIZE = 0x8000

STACK_BASE = 256

# Base pointers before program runs, far enough from each other and from stack
DEFAULT_RAM: Mapping[int, int] = {
    0: STACK_BASE,
    1: 300,
    2: 400,
    3: 3000,
    4: 3010,
}


def to_signed(value: int) -> int:
    return value - (WORD_MASK + 1) if value & SIGN_BIT else value


def _alu(x: int, y: int, control: int) -> int:
    zx, nx, zy, ny, f, no = ((control >> shift) & 1 for shift in range(5, -1, -1))
    if zx:
        x = 0
    if nx:
        x = ~x & WORD_MASK
    if zy:
        y = 0
    if ny:
        y = ~y & WORD_MASK
    out = (x + y) if f else (x & y)
    if no:
        out = ~out
    return out & WORD_MASK


class HackMachine:
    def __init__(self, words: Sequence[str], ram: Mapping[int, int]) -> None:
        self.rom = [int(word, 2) for word in words]
        self.ram = [0] * RAM_SIZE
        for address, value in ram.items():
            self.ram[address] = value & WORD_MASK
        self.a = 0
        self.d = 0
        self.pc = 0
        self.halted = False

    def step(self) -> None:
        instruction = self.rom[self.pc]
        if not instruction & SIGN_BIT:
            self.a = instruction
            self.pc += 1
            return

        use_memory = (instruction >> 12) & 1
        control = (instruction >> 6) & 0b111111
        dest = (instruction >> 3) & 0b111
        jump = instruction & 0b111

        address = self.a
        y = self.ram[address] if use_memory else address
        out = _alu(self.d, y, control)

        is_negative = bool(out & SIGN_BIT)
        is_zero = out == 0
        is_positive = not is_negative and not is_zero
        should_jump = (
            (jump & 0b100 and is_negative)
            or (jump & 0b010 and is_zero)
            or (jump & 0b001 and is_positive)
        )

        if dest & 0b001:
            self.ram[address] = out
        if dest & 0b010:
            self.d = out
        if dest & 0b100:
            self.a = out

        if not should_jump:
            self.pc += 1
            return

        # `@k; 0;JMP` placed at k is an infinite loop, treated as halt
        if address == self.pc - 1 and self.rom[address] == address:
            self.halted = True
        self.pc = address

    def run(self, max_steps: int = 200_000) -> HackMachine:
        for _ in range(max_steps):
            if self.halted or self.pc >= len(self.rom):
                return self
            self.step()
        msg = f"Program did not halt within {max_steps} steps"
        raise AssertionError(msg)

    @property
    def sp(self) -> int:
        return self.ram[0]

    def stack_top(self) -> int:
        return to_signed(self.ram[self.sp - 1])


RUN_VM_T: TypeAlias = Callable[..., HackMachine]


@pytest.fixture
def run_vm() -> RUN_VM_T:
    """Translate, assemble and execute given VM source, returns machine after halt."""

    def _run_vm(
        source: str,
        *,
        ram: Mapping[int, int] | None = None,
        bootstrap: bool = False,
        module_name: str = "Main",
    ) -> HackMachine:
        assembly = translate_source(source, module_name=module_name, bootstrap=bootstrap)
        words = assemble_source("\n".join(assembly)).words
        initial_ram = {} if bootstrap else dict(DEFAULT_RAM)
        initial_ram.update(ram or {})
        return HackMachine(words, initial_ram).run()

    return _run_vm
