# sapcore

Building blocks of a small 8-bit computer in the style of the SAP-1
breadboard design: a bus, general purpose registers, an arithmetic logic
unit, a flags register, a clock, an assembler and a disassembler.

Memory addresses are 4 bits wide, so a program holds at most 16 bytes of
instructions and data.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Components

- `sapcore.bus.Bus`: an 8-bit bus. `read()` returns the current value,
  `write(value)` stores it (truncated to 8 bits) and `reset()` sets it to 0.
  An optional `observer` callable receives every new value.
- `sapcore.register.GenericRegister(name, bus)`: an 8-bit register and a
  `ClockListener`. `in_()` makes it take the bus value on the next rising
  clock edge (`clock_ticked()`), `out()` puts its value on the bus, and
  `reset()` sets it to 0. The `value` property holds the stored value. An
  optional `observer` callable and an optional `register_listener`
  (a `RegisterListener`) are told about every change.
- `sapcore.alu.ArithmeticLogicUnit(a_register, b_register, bus)`: a
  `RegisterListener` that adds A and B whenever `register_value_changed()` is
  called, or computes A - B on `subtract()` using B's two's complement.
  `value`, `carry` and `zero` hold the result; `out()` puts the value on the
  bus and `reset()` sets it to 0 with only the zero bit set. An optional
  `observer` callable receives `(value, carry, zero)` after each calculation.
- `sapcore.flags.FlagsRegister(arithmetic_logic_unit)`: after `in_()`, copies
  the ALU's carry and zero bits into `carry_flag` and `zero_flag` on the next
  rising clock edge. `reset()` clears both. An optional `observer`
  (a `FlagsRegisterObserver`) is told about every change.
- `sapcore.clock.Clock(time_source=None)`: a square-wave clock with a 50% duty
  cycle that calls `clock_ticked()` on its listeners at each rising edge and
  `inverted_clock_ticked()` at each falling edge, in the order they were added
  with `add_listener()`. Set the frequency with `set_frequency(hz)` (at least
  0.1, otherwise `ClockError`) before starting it, or starting raises
  `ClockError`. `start()` runs it on a background thread until `stop()` or
  `halt()`; `join()` waits for it; `single_step()` runs one full cycle
  synchronously. After `halt()` the clock will not start again until
  `reset()`. `increase_frequency()` and `decrease_frequency()` change the
  frequency in steps that grow with it (0.1, 1, 10, 100 or 1000 Hz), never
  going below 0.1. The optional callables `on_tick` (given `True` for a rising
  edge, `False` for a falling one) and `on_frequency_changed` (given the new
  frequency) observe it. A custom `time_source` supplies `reset()`, `delta()`
  and `sleep(nanoseconds)` in nanoseconds; by default the monotonic clock is
  used.
- `sapcore.listeners`: the `ClockListener`, `RegisterListener`,
  `StepListener` and `FlagsRegisterObserver` interfaces.

Every component also has a readable `str()` showing its current state.

```python
from sapcore.alu import ArithmeticLogicUnit
from sapcore.bus import Bus
from sapcore.register import GenericRegister

bus = Bus()
a = GenericRegister("A", bus)
b = GenericRegister("B", bus)
alu = ArithmeticLogicUnit(a, b, bus)
a.register_listener = alu
b.register_listener = alu

bus.write(30)
a.in_()
a.clock_ticked()
bus.write(12)
b.in_()
b.clock_ticked()
alu.subtract()
print(alu.value, alu.carry, alu.zero)  # 18 True False
```

## Assembling and disassembling

```python
from sapcore.assembler import Assembler
from sapcore.disassembler import disassemble

program = Assembler().assemble([
    "LDA 14   ; load the value at address 14",
    "ADD 15",
    "OUT",
    "HLT",
    "ORG 14",
    "DB 28",
    "DB 14",
])
for instruction in program:
    print(instruction.address, instruction.opcode, instruction.operand, instruction.byte)

print(disassemble(0b00111001))  # SUB 9
```

`Assembler().assemble(lines)` returns a list of `Instruction` values, each a
4-bit `address`, a 4-bit `opcode` and a 4-bit `operand`, with `byte` giving
the combined 8-bit value. `Assembler().load_instructions(path)` reads a
`.asm` file and assembles it in the same way.

The instruction set is the `sapcore.disassembler.Opcode` enum: NOP, LDA, ADD,
SUB, STA, LDI, JMP, JC, JZ, OUT and HLT. The assembler also understands two
pseudo-instructions:

- `ORG n` moves the current memory location to address `n`.
- `DB n` stores the byte `n` at the current memory location.

A comment starts with `;` and runs to the end of the line; blank lines are
skipped. Unknown mnemonics, wrong argument counts, operands above 15,
addresses past 15 and files that cannot be opened raise `AssemblerError`.

`disassemble(instruction)` turns an 8-bit instruction back into text and
returns `"UNKNOWN"` for an opcode outside the instruction set.

## What is not included

The package holds the individual components only. It has no memory, memory
address register, program counter, instruction register, output register,
step counter or instruction decoder, and nothing that wires the parts into a
complete computer, so it cannot load and run an assembled program by itself.
`StepListener` is defined but nothing in the package implements it. There is
no command-line program and no user interface.