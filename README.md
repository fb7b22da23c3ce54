# patternkit

Compact, runnable examples of classic design patterns. Each pattern lives in
its own module, can be imported and explored from Python, and has a command
that runs a short demonstration.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Patterns

| Module | Pattern | Command |
| --- | --- | --- |
| `patternkit.abstract_factory` | Abstract factory (Mac and Windows widgets) | `patternkit-abstract-factory` |
| `patternkit.builder` | Builder with a director (cars and car manuals) | `patternkit-builder` |
| `patternkit.factory_method` | Factory method (maze games and rooms) | `patternkit-factory-method` |
| `patternkit.prototype` | Prototype (cloning a circle) | `patternkit-prototype` |
| `patternkit.singleton` | Singleton (a shared, thread-safe call log) | `patternkit-singleton` |
| `patternkit.adapter` | Adapter (making an incompatible target usable) | `patternkit-adapter` |
| `patternkit.bridge` | Bridge (shapes drawn through a drawing API) | `patternkit-bridge` |

## Examples

### Abstract factory

`GuiFactory` creates a `Button` and a `Checkbox` of one family;
`MacFactory` and `WindowsFactory` are the two families. Each widget prints a
message when used and returns it.

```python
from patternkit.abstract_factory import MacFactory, render

MacFactory().create_button().press()   # "MacOS button has pressed"
render(MacFactory())   # presses two Mac buttons, switches two Mac checkboxes
```

### Builder

`CarBuilder` builds a `Car` and `CarManualBuilder` builds a `Manual` from the
same parts. The director functions `construct_sports_car`,
`construct_city_car` and `construct_suv` fill in a builder.

```python
from patternkit.builder import CarBuilder, CarManualBuilder, construct_sports_car, construct_city_car

builder = CarBuilder()
construct_sports_car(builder)
car = builder.build()          # car.fuel == 5.0 (DEFAULT_FUEL)

manual_builder = CarManualBuilder()
construct_city_car(manual_builder)
print(manual_builder.build())
```

which prints:

```
Type of car: CityCar
Count of seats: 2
Engine: volume - 1.2; mileage - 0
Transmission: Automatic
GPS Navigator: Functional
```

Calling `build()` before the car type, seats, engine and transmission are set
raises `BuildError`; the GPS navigator is optional. `set_seats` raises
`ValueError` outside 0 to 65535. `Engine.go` raises `EngineNotStartedError`
unless `Engine.on()` was called first.

### Factory method

`MagicMaze` plays its rooms in the order given; `OrdinaryMaze` plays them in
reverse. `MazeGame.play()` returns the lines each room rendered.

```python
from patternkit.factory_method import MagicMaze, OrdinaryMaze, run

run(OrdinaryMaze())   # Ordinary Room: #2, then #1
run(MagicMaze())      # Magic Room:Infinite Room, then Magic Room:Red Room
```

### Prototype

```python
from patternkit.prototype import Circle

copy = Circle(5.0).clone()   # an independent copy
copy.area()                  # PI * r * r, with PI = 3.14
```

### Singleton

`do_a_call()` records a call in the shared `CALLS` log, a thread-safe
`CallLog`; `len(CALLS)` counts them. `change(state)` returns the state plus
one, showing state passed explicitly instead of held globally.

### Adapter

```python
from patternkit.adapter import SpecificTarget, TargetAdapter, call

call(TargetAdapter(SpecificTarget()))   # prints 'Specific request.'
```

### Bridge

`Circle`, `Rectangle` and `Square` delegate drawing to a `DrawApi` such as
`WindowsDrawApi` or `MobileDrawApi`. A `Rectangle` with equal sides is drawn
as a square. Negative dimensions raise `ValueError`. The drawing APIs print
and return a line such as `This is circle`, and keep a record of what they
drew in `drawn`.

```python
from patternkit.bridge import Circle, MobileDrawApi

Circle(3, 7, 4, MobileDrawApi()).draw()   # "This is circle"
```

## Commands

Every module can be run as a demonstration:

```
patternkit-abstract-factory [--platform {mac,windows}]   # default: windows
patternkit-builder
patternkit-factory-method
patternkit-prototype
patternkit-singleton [--variant {lazy,mutex,safe}]      # default: mutex
patternkit-adapter
patternkit-bridge
```

## What this package does not do

The widgets, rooms and shapes here only print text. There are no real
windows, graphics or user interface behind them.