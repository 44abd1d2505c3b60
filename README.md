# nbfc

Library pieces for a notebook fan control service: a lenient JSON reader
and an indented JSON writer for configuration and state files, fan-speed
threshold selection, a small command-line option parser and the usage
texts of the service's tools. There are no dependencies beyond the
standard library.

## Modules

- `nbfc.jsonparse` – `parse(text)` reads a relaxed JSON dialect and
  returns plain Python values (dicts, lists, int, float, str, bool,
  None). It accepts `//` and `/* */` comments, optional commas between
  items and C-style integer literals (`0x1F`, `017`); unknown escapes are
  kept as written and text after the first value is ignored. Bad input
  raises `JsonError`, whose `kind` is a `JsonErrorKind` and whose
  `position` is the offset in the text. Bytes are decoded as UTF-8.
- `nbfc.jsonwrite` – `to_string(value, indent=0)` renders a value with
  every item on its own line and nested items indented by three more
  spaces; floats are written with six decimals. `escape_string(text)`
  escapes quotes, backslashes and control characters as `\uXXXX`.
- `nbfc.threshold_manager` – `ThresholdManager(thresholds, legacy=False)`
  orders `TemperatureThreshold(up_threshold, down_threshold, fan_speed)`
  records by their upper bound and, through `auto_select(temperature)`,
  moves between them with hysteresis. `current()` returns the threshold
  selected last. An empty list raises `ValueError`.
- `nbfc.trace` – `Trace` keeps a stack of location labels rendered as
  `a: b: c` by `str()`; `push(text)` adds one, `pop()` removes the last.
- `nbfc.program_name` – `program_name(path)` returns what follows the
  last slash that is not the final character.
- `nbfc.optparse` – `Parser(argv, options, flags)` reads a command line
  against `Option(optstring, value, flags)` records and `ExclusiveGroup`s.
  Each call to `get_opt()` returns the next option's `value` (its
  argument is in `optarg`) or None at the end. Errors raise `ValueError`
  and set `error` to a `ParseErrorKind`; `explain_error()` prints the
  message to standard error. `check_required()`, `get_arg()`,
  `get_optarg()`, `at_end()` and `set_options()` complete the interface.
- `nbfc.helptext` – `client_help(command)`, `ec_probe_help(command,
  program)` and `service_help(program, sysconfdir)` return usage texts;
  an unknown command raises `KeyError`.

## Examples

```python
from nbfc.jsonparse import parse
from nbfc.jsonwrite import to_string

config = parse('{"TargetFanSpeeds": [50.0 -1] // saved speeds\n}')
print(config)                 # {'TargetFanSpeeds': [50.0, -1]}
print(to_string(config))
```

```python
from nbfc.threshold_manager import TemperatureThreshold, ThresholdManager

manager = ThresholdManager(
    [
        TemperatureThreshold(up_threshold=0, down_threshold=0, fan_speed=0),
        TemperatureThreshold(up_threshold=60, down_threshold=48, fan_speed=50),
        TemperatureThreshold(up_threshold=75, down_threshold=65, fan_speed=100),
    ],
    legacy=False,
)
print(manager.auto_select(62.0).fan_speed)
```

```python
from nbfc.optparse import OPTIONS_PYTHON, ExclusiveGroup, Option, Parser

options = [
    ExclusiveGroup("speed", [Option("-a|--auto", "auto"), Option("-s|--speed", "speed", 1)]),
    Option("-f|--fan", "fan", 1),
]
parser = Parser(["set", "-s", "50", "-f", "0"], options, OPTIONS_PYTHON)
while (value := parser.get_opt()) is not None:
    print(value, parser.optarg)
```

## What it does not do

The package holds no running service and no command-line programs. It
does not talk to an embedded controller, open sockets, exchange messages
between a client and a service, manage a PID file, smooth temperature
readings over time or load and save the service's state file. Only the
JSON text, threshold, option-parsing and help-text parts are provided.