"""Help texts shown by the client, the probing tool and the service."""

from __future__ import annotations

__all__ = [
    "CLIENT_COMMANDS",
    "EC_PROBE_COMMANDS",
    "DEFAULT_SYSCONFDIR",
    "client_help",
    "ec_probe_help",
    "service_help",
]

DEFAULT_SYSCONFDIR = "/etc"

_CLIENT_MAIN = """\
Usage: nbfc [-h] [--version] COMMAND [...]

NoteBook FanControl CLI Client

Optional arguments:
  -h, --help            Show this help message and exit
  --version             Show program's version number and exit

Commands:
    start               Start the service
    stop                Stop the service
    restart             Restart the service
    status              Show the service status
    config              List or apply configs
    set                 Control fan speed
    update              Download new configuration files
    wait-for-hwmon      Wait for /sys/class/hwmon/hwmon* files
    get-model-name      Print out model name
    help                Show help
    donate              Show how to support the project
    warranty            Show warranty
"""

_CLIENT_COMMAND_TEXTS = {
    "start": """\
Usage: nbfc start [-h] [-r]

Start the NBFC service

Optional arguments:
  -r, --read-only       Start in read-only mode
  -h, --help            Shows this message
""",
    "restart": """\
Usage: nbfc restart [-h] [-r]

Restart the NBFC service

Optional arguments:
  -r, --read-only       Restart in read-only mode
  -h, --help            Shows this message
""",
    "config": """\
Usage: nbfc config [-h] (-l | -s config | -a config | -r)

Set or list configurations for the NBFC service

Optional arguments:
  -h, --help            Show this help message and exit
  -l, --list            List all available configs (default)
  -s config, --set config
                        Set a config
  -a config, --apply config
                        Set a config and enable fan control
  -r, --recommend       List configs which may work for your device
""",
    "status": """\
Usage: nbfc status [-h] (-a | -s | -f FAN INDEX) [-w SECONDS]

Show status about the NBFC service.

Optional arguments:
  -h, --help            Show this help message and exit
  -a, --all             Show service and fan status (default)
  -s, --service         Show service status
  -f FAN INDEX, --fan FAN INDEX (zero based)
                        Show fan status
  -w SECONDS, --watch SECONDS
                        Show status periodically
""",
    "sensors": """\
Usage: nbfc sensors (list | set | show) [OPTIONS...]

Configure fan sensors

  list
    List all available sensors and their temperature files.

  show
    Show all available fans and their sensor configuration.

  set -f FAN INDEX [-s SENSOR...] [-a ALGORITHM]
    Configure sensors and algorithm for a fan.

      -f FAN INDEX, --fan FAN INDEX
                        Fan to configure
      -s SENSOR, --sensor SENSOR
                        Sensor to add. Can be specified multiple times
      -a ALGORITHM, --algorithm ALGORITHM
                        Algorithm (Average, Min, Max)
      --force
                        Force applying sensors if not found

    If no sensors are specified, the sensors in the fan config will be
    cleared and defaults will be used.

    If no algorithm is specified, the algorithm in the fan config will be
    cleared and the default will be used.
""",
    "set": """\
Usage: nbfc set [-h] (-a | -s PERCENT) [-f FAN INDEX]

Set the speed of fans.
If -f|--fan is not given, apply speed to all available fans.

Optional arguments:
  -h, --help            Show this help message and exit
  -a, --auto            Set fan speed to 'auto'
  -s PERCENT, --speed PERCENT
                        Set fan speed to PERCENT
  -f FAN INDEX, --fan FAN INDEX
                        Fan index (zero based)
""",
    "stop": """\
Usage: nbfc stop [-h]

Stop the NBFC service.

Optional arguments:
  -h, --help            Shows this message and exit
""",
    "update": """\
Usage: nbfc update [-h] [-p NUM] [-q]

Update the available configuration files and the model support database.

Optional arguments:
  -h, --help            Show this help message and exit
  -p, --parallel NUM    Set the number of parallel downloads
  -q, --quiet           Quiet mode
""",
    "wait-for-hwmon": """\
Usage: nbfc wait-for-hwmon [-h]

Wait until files in /sys/class/hwmon are populated.

Optional arguments:
  -h, --help            Shows this message and exit
""",
    "get-model-name": """\
Usage: nbfc get-model-name [-h]

Print out model name.

Optional arguments:
  -h, --help            Shows this message and exit
""",
    "show-variable": """\
Usage: nbfc show-variable [-h] VARIABLE

Print out a variable.

Optional arguments:
  -h, --help            Shows this message and exit
""",
    "complete-fans": """\
Usage: nbfc complete-fans [-h]

Used for completing shell command lines.

Optional arguments:
  -h, --help            Shows this message and exit
""",
    "complete-sensors": """\
Usage: nbfc complete-sensors [-h]

Used for completing shell command lines.

Optional arguments:
  -h, --help            Shows this message and exit
""",
    "warranty": """\
Usage: nbfc warranty [-h]

Print legal disclaimer and warranty info.

Optional arguments:
  -h, --help            Shows this message and exit
""",
    "donate": """\
Usage: nbfc donate [-h]

Displays information on how to support the project through a donation.

Optional arguments:
  -h, --help            Shows this message and exit
""",
}

CLIENT_COMMANDS = tuple(_CLIENT_COMMAND_TEXTS)

_HEX_NOTE = (
    "All input values are interpreted as decimal numbers by default. "
    'Hexadecimal values may be entered by prefixing them with "0x".\n'
)

_EC_PROBE_MAIN = """\
Usage: {program} [-h] [-e EC] COMMAND [...]

Probing tool for the embedded controller

Optional arguments:
  -h, --help            Show this help message and exit
  -e EC, --embedded-controller EC
                        Specify embedded controller to use

Commands:
  dump                  Dump all EC registers
  load                  Load a previously made dump
  read                  Read a byte from a EC register
  write                 Write a byte to a EC register
  monitor               Monitor all EC registers for changes
  watch                 Monitor all EC registers for changes (alternative version)

""" + _HEX_NOTE

_EC_PROBE_COMMAND_TEXTS = {
    "dump": """\
Usage: {program} dump [-h]

Dump all EC registers

Optional arguments:
  -h, --help  Show this help message and exit
""",
    "load": """\
Usage: {program} load [-h] FILE

Load a dump and write it to the EC registers

Positional arguments:
  FILE        Dump file

Optional arguments:
  -h, --help  Show this help message and exit
""",
    "read": """\
Usage: {program} read [-h] REGISTER

Read a byte from a EC register

Positional arguments:
  REGISTER    Register source

Optional arguments:
  -h, --help  Show this help message and exit
  -w, --word  Read two registers as one word

""" + _HEX_NOTE,
    "write": """\
Usage: {program} write [-h] REGISTER VALUE

Write a byte to a EC register

Positional arguments:
  REGISTER    Register destination
  VALUE       Value to write

Optional arguments:
  -h, --help  Show this help message and exit
  -w, --word  Write VALUE to two registers

""" + _HEX_NOTE,
    "monitor": """\
Usage: {program} monitor [-h] [-i seconds] [-t seconds] [-r FILE] [-c] [-d]

Monitor all EC registers for changes

Optional arguments:
  -h, --help            Show this help message and exit
  -i seconds, --interval SECONDS
                        Sets the update interval in seconds
  -t seconds, --timespan SECONDS
                        Sets how many seconds the program will run
  -r FILE, --report FILE
                        Save all readings as a CSV file
  -c, --clearly         Blanks out consecutive duplicate readings
  -d, --decimal         Output readings in decimal format instead of hexadecimal format
""",
    "watch": """\
Usage: {program} watch [-h] [-i seconds] [-t seconds]

Monitor all EC registers for changes (alternative version)

Optional arguments:
  -h, --help            Show this help message and exit
  -i seconds, --interval SECONDS
                        Sets the update interval in seconds
  -t seconds, --timespan SECONDS
                        Sets how many seconds the program will run
""",
}

EC_PROBE_COMMANDS = tuple(_EC_PROBE_COMMAND_TEXTS)

_SERVICE = """\
Usage: {program} [-h] [-r] [-f] [-d] [-c config] [-s state.json] [-e EC]

NoteBook FanControl service

Optional arguments:
  -h, --help            Show this help message and exit
  -r, --read-only       Start in read-only mode
  -f, --fork            Switch process to background after sucessfully started
  -d, --debug           Enable tracing of reads and writes of the embedded controller
  -c CONFIG, --config-file CONFIG
                        Use alternative config file (default {sysconfdir}/nbfc/nbfc.json)
  -e EC, --embedded-controller EC
                        Specify embedded controller to use
"""


def client_help(command: str | None = None) -> str:
    """Return the help of a client command, or the general help for None.

    Raises KeyError for an unknown command.
    """
    if command is None:
        return _CLIENT_MAIN
    try:
        return _CLIENT_COMMAND_TEXTS[command]
    except KeyError:
        raise KeyError(f"no help for command: {command}") from None


def ec_probe_help(command: str | None = None, program: str = "ec_probe") -> str:
    """Return the help of a probing command (general help for None).

    Raises KeyError for an unknown command.
    """
    if command is None:
        template = _EC_PROBE_MAIN
    else:
        try:
            template = _EC_PROBE_COMMAND_TEXTS[command]
        except KeyError:
            raise KeyError(f"no help for command: {command}") from None
    return template.format(program=program)


def service_help(
    program: str = "nbfc_service", sysconfdir: str = DEFAULT_SYSCONFDIR
) -> str:
    """Return the service's help, naming the default config file location."""
    return _SERVICE.format(program=program, sysconfdir=sysconfdir)