"""
Interactive tweak menu for Pop!_OS / Debian desktops

Each numbered entry wraps a fixed list of privileged system calls: package
installs, systemd unit changes, tmpfiles.d and udev rule files, and a manual
edit of the PulseAudio daemon config.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from rich.table import Table
from rich.text import Text

from ..exceptions import CommandFailed, PermissionDenied
from ..core.confirm import confirm
from ..core.privilege import current_user
from .commands.base import Outcome

logger = logging.getLogger('MyShell.shell.tweaks')

MENU_TITLE = "--- Pop!_OS Tweak Menu ---"
MENU_RULE = "-" * 48
MENU_PROMPT = "Select an option (1-11 or q): "
QUIT_KEYS = ('q',)

@dataclass(frozen=True)
class Run:
    """Run a command as root; {user} is replaced with the invoking user"""
    argv: Tuple[str, ...]

@dataclass(frozen=True)
class WriteFile:
    """Write lines to a root-owned file"""
    path: str
    lines: Tuple[str, ...]

@dataclass(frozen=True)
class EditFile:
    """Open a root-owned file in the configured editor"""
    path: str

@dataclass(frozen=True)
class Notice:
    text: str

Step = Union[Run, WriteFile, EditFile, Notice]

@dataclass(frozen=True)
class Tweak:
    key: str
    name: str
    label: str
    intro: str
    steps: Tuple[Step, ...]
    done: str = "Done."
    notes: Tuple[str, ...] = ()
    confirm: Optional[str] = None
    log_message: Optional[str] = None
    group_end: bool = False

    @property
    def logged(self) -> str:
        return self.log_message or f"features: ran {self.name}"

def _tmpfiles_rule(target: str) -> str:
    return f"w {target} - - - - performance"

PULSE_CONFIG = '/etc/pulse/daemon.conf'

TWEAKS: Tuple[Tweak, ...] = (
    Tweak(
        key='1', name='install_performance_tweaks',
        label="Install Performance Tweaks (nohang, preload)",
        intro="Installing 'nohang' and 'preload'...",
        steps=(Run(('apt-get', 'install', 'nohang', 'preload')),),
    ),
    Tweak(
        key='2', name='enable_performance_services',
        label="Enable Performance Services (nohang, preload)",
        intro="Enabling 'nohang' and 'preload' systemd services...",
        steps=(
            Run(('systemctl', 'enable', 'nohang')),
            Run(('systemctl', 'enable', 'preload')),
        ),
    ),
    Tweak(
        key='3', name='disable_oomd',
        label="Disable systemd-oomd (if using nohang)",
        intro="Disabling systemd-oomd (replaced by nohang)...",
        steps=(Run(('systemctl', 'disable', 'systemd-oomd')),),
    ),
    Tweak(
        key='4', name='set_cpu_governor',
        label="Set CPU Governor to 'performance'",
        intro="Setting CPU governor to 'performance'...",
        steps=(
            WriteFile('/usr/lib/tmpfiles.d/cpu-governor.conf',
                      (_tmpfiles_rule('/sys/devices/system/cpu/cpu*/cpufreq/scaling_governor'),)),
        ),
        done="CPU governor policy created. (May require reboot to apply)",
    ),
    Tweak(
        key='5', name='set_power_policies',
        label="Set Power Policies to 'performance' (PCIe, SATA, etc.)",
        intro="Setting various power policies to 'performance' (PCIe, SATA, etc.)...",
        steps=(
            WriteFile('/usr/lib/tmpfiles.d/energy_performance_preference.conf',
                      (_tmpfiles_rule('/sys/devices/system/cpu/cpufreq/policy*/energy_performance_preference'),)),
            WriteFile('/usr/lib/tmpfiles.d/pcie_aspm_performance.conf',
                      (_tmpfiles_rule('/sys/module/pcie_aspm/parameters/policy'),)),
            WriteFile('/usr/lib/tmpfiles.d/power_dpm_state.conf',
                      (_tmpfiles_rule('/sys/class/drm/card0/device/power_dpm_state'),)),
            WriteFile('/usr/lib/udev/rules.d/50-sata.rules', (
                '# SATA Active Link Power Management',
                'ACTION=="add", SUBSYSTEM=="scsi_host", KERNEL=="host*", '
                'ATTR{link_power_management_policy}="max_performance"',
            )),
        ),
        done="Power policies created. (May require reboot to apply)",
        group_end=True,
    ),
    Tweak(
        key='6', name='install_sound_drivers',
        label="Install Sound Packages (pulseaudio, jackd2)",
        intro="Installing sound packages (pulseaudio, jackd2)...",
        steps=(Run(('apt-get', 'install', 'alsa-firmware-loaders', 'pulseaudio',
                    'pulseaudio-module-jack', 'jackd2')),),
    ),
    Tweak(
        key='7', name='tweak_sound_config',
        label="Edit Sound Config (soxr-vhq) (MANUAL EDIT)",
        intro=f"This will open '{PULSE_CONFIG}' in '{{editor}}'.",
        notes=(
            "Per the guide, you must manually find and edit lines like:",
            "  ; resample-method = ... -> resample-method = soxr-vhq",
            "  ; default-sample-format = ... -> default-sample-format = float32le",
            "  ; default-sample-rate = ... -> default-sample-rate = 96000",
        ),
        confirm="Open {editor} to edit this file now?",
        steps=(EditFile(PULSE_CONFIG),),
        done="File edit complete. You may need to restart pulseaudio.",
        log_message="features: opened daemon.conf for manual edit",
    ),
    Tweak(
        key='8', name='install_fonts',
        label="Install Extra Fonts (Noto, DejaVu)",
        intro="Installing common fonts (Noto, DejaVu, Liberation)...",
        steps=(Run(('apt-get', 'install', 'fonts-noto', 'fonts-noto-cjk', 'fonts-dejavu',
                    'fonts-liberation-sans', 'fonts-opensans')),),
        group_end=True,
    ),
    Tweak(
        key='9', name='set_io_schedulers',
        label="Set I/O Schedulers (bfq/none)",
        intro="Creating udev rule for I/O schedulers (bfq for SSD/HDD, none for NVMe)...",
        steps=(
            WriteFile('/etc/udev/rules.d/60-ioschedulers.rules', (
                '# set scheduler for NVMe',
                'ACTION=="add|change", KERNEL=="nvme[0-9]*", ATTR{queue/scheduler}="none"',
                '# set scheduler for SSD and eMMC',
                'ACTION=="add|change", KERNEL=="sd[a-z]|mmcblk[0-9]*", ATTR{queue/rotational}=="0", '
                'ATTR{queue/scheduler}="bfq"',
                '# set scheduler for rotating disks',
                'ACTION=="add|change", KERNEL=="sd[a-z]", ATTR{queue/rotational}=="1", '
                'ATTR{queue/scheduler}="bfq"',
            )),
            Notice("Reloading udev rules..."),
            Run(('udevadm', 'control', '--reload-rules')),
            Run(('udevadm', 'trigger')),
        ),
        done="I/O scheduler rules applied.",
    ),
    Tweak(
        key='10', name='install_tlp',
        label="Install TLP (Laptop Battery Improvement)",
        intro="Installing and enabling 'tlp' for battery management...",
        steps=(
            Run(('apt-get', 'install', 'tlp')),
            Run(('systemctl', 'enable', 'tlp.service')),
            Run(('systemctl', 'start', 'tlp.service')),
        ),
        done="TLP is now installed and running.",
    ),
    Tweak(
        key='11', name='install_fusuma',
        label="Install Fusuma (Touchpad Gestures)",
        intro="Installing 'fusuma' for touchpad gestures...",
        steps=(
            Run(('apt-get', 'install', 'ruby', 'libinput-tools', '-y')),
            Run(('gpasswd', '-a', '{user}', 'input')),
            Run(('gem', 'install', 'fusuma')),
        ),
        done="Fusuma installed. IMPORTANT: You must REBOOT for the group change to take effect.",
        group_end=True,
    ),
)

class TweakMenu:
    """Numbered sub-menu started by the `features` command"""

    def __init__(self, context, tweaks: Tuple[Tweak, ...] = TWEAKS):
        self.context = context
        self.terminal = context.terminal
        self.tweaks = tweaks
        self.by_key = {tweak.key: tweak for tweak in tweaks}

    def _fill(self, text: str) -> str:
        return text.replace('{editor}', self.context.config.editor)

    def show(self):
        """Print the menu"""
        self.terminal.echo(MENU_TITLE)
        table = Table(box=None, show_header=False, padding=(0, 1, 0, 0))
        table.add_column(justify='right', no_wrap=True)
        table.add_column()
        for tweak in self.tweaks:
            table.add_row(Text(f"[{tweak.key}]"), Text(self._fill(tweak.label)))
            if tweak.group_end:
                table.add_row("", "")
        table.add_row(Text("[q]"), Text("Quit Menu"))
        self.terminal.console.print(table)
        self.terminal.echo(MENU_RULE)

    def run(self):
        """Loop until the user quits, then log the exit"""
        while True:
            self.show()
            try:
                choice = self.terminal.read_line(MENU_PROMPT, history=False).strip()
            except EOFError:
                self.terminal.echo()
                choice = 'q'

            if choice.lower() in QUIT_KEYS:
                self.terminal.echo("Exiting features menu...")
                break

            tweak = self.by_key.get(choice)
            if tweak is None:
                self.terminal.error("Invalid option. Please try again.")
            else:
                self.apply(tweak)
            self.terminal.echo()

        self.context.action_log.log("features: exited menu")

    def apply(self, tweak: Tweak) -> Outcome:
        """Run one tweak: optional confirmation, privilege gate, steps, log"""
        self.terminal.echo(self._fill(tweak.intro))
        for note in tweak.notes:
            self.terminal.echo(note)

        if tweak.confirm and not confirm(self.terminal, self._fill(tweak.confirm)):
            self.terminal.echo("Cancelled.")
            return Outcome.CANCELLED

        try:
            self.context.privilege.require()
        except PermissionDenied as e:
            self.terminal.error(str(e))
            self.context.action_log.log(f"features: {tweak.name} aborted ({str(e).rstrip('.')})")
            return Outcome.DENIED

        try:
            for step in tweak.steps:
                self._run_step(step)
        except CommandFailed as e:
            logger.info(f"Tweak {tweak.name} failed: {e}")
            self.terminal.error(f"Error: {e}")
            self.context.action_log.log(f"features: {tweak.name} failed ({e})")
            return Outcome.FAILURE

        self.context.action_log.log(tweak.logged)
        self.terminal.success(tweak.done)
        return Outcome.SUCCESS

    def _run_step(self, step: Step):
        runner = self.context.runner
        if isinstance(step, Notice):
            self.terminal.echo(step.text)
        elif isinstance(step, WriteFile):
            runner.write_file(step.path, '\n'.join(step.lines) + '\n')
        elif isinstance(step, EditFile):
            runner.check([self.context.config.editor, step.path], privileged=True)
        elif isinstance(step, Run):
            user = current_user()
            runner.check([arg.replace('{user}', user) for arg in step.argv], privileged=True)
        else:
            raise TypeError(f"Unknown tweak step: {step!r}")
