from __future__ import annotations

import logging
from typing import List

from ..context import InstallContext
from ..errors import StepFailure
from ..lib.prompts import InputCollector, Secret
from ..pipeline import CommandStep, Step, run_pipeline

logger = logging.getLogger(__name__)


def _set_password(ctx: InstallContext, user: str, secret: Secret) -> None:
    # Passed on stdin only; the command line and the log stay clean.
    ctx.run(["chpasswd"], input_text=f"{user}:{secret.reveal()}\n")


class LocaleStep:
    step_id = "locale"
    description = "Generate locales and write /etc/locale.conf"
    irreversible = False

    def run(self, ctx: InstallContext) -> None:
        cfg = ctx.config
        ctx.prompts.say(
            f"Please uncomment desired locales (e.g., {cfg.locale_lang}, {cfg.locale_messages}) in /etc/locale.gen."
        )
        ctx.prompts.pause(f"Press any key to open {cfg.editor}...")
        ctx.run([cfg.editor, "/etc/locale.gen"], interactive=True)
        ctx.run(["locale-gen"])
        ctx.write_file(
            "/etc/locale.conf",
            f"LANG={cfg.locale_lang}\nLC_MESSAGES={cfg.locale_messages}\n",
        )


class VconsoleStep:
    step_id = "vconsole"
    description = "Set the console keyboard layout"
    irreversible = False

    def run(self, ctx: InstallContext) -> None:
        ctx.write_file("/etc/vconsole.conf", f"KEYMAP={ctx.config.keymap}\n")


class HostnameStep:
    step_id = "hostname"
    description = "Set the hostname"
    irreversible = False

    def run(self, ctx: InstallContext) -> None:
        hostname = ctx.prompts.collect_field("Enter the hostname (e.g., omega)")
        ctx.write_file("/etc/hostname", hostname + "\n")
        logger.info("Hostname set to %s", hostname)


class RootPasswordStep:
    step_id = "root_password"
    description = "Set the root password"
    irreversible = False

    def run(self, ctx: InstallContext) -> None:
        secret = ctx.prompts.collect_secret("Enter root password")
        _set_password(ctx, "root", secret)


class CreateUserStep:
    step_id = "user"
    description = "Create the administrative user"
    irreversible = False

    def run(self, ctx: InstallContext) -> None:
        username = ctx.prompts.collect_field("Enter the username (e.g., ishmael)")
        secret = ctx.prompts.collect_secret(f"Enter password for {username}")
        ctx.run(["useradd", "-m", "-G", "wheel", "-s", "/bin/bash", username])
        _set_password(ctx, username, secret)
        logger.info("Created user %s (group wheel)", username)


class SudoersStep:
    step_id = "sudo"
    description = "Grant sudo to the wheel group"
    irreversible = False

    def run(self, ctx: InstallContext) -> None:
        editor = ctx.config.editor
        ctx.prompts.say("Please uncomment the line '%wheel ALL=(ALL:ALL) ALL' in the sudoers file.")
        ctx.prompts.pause("Press any key to open visudo...")
        ctx.run(["env", f"EDITOR={editor}", "visudo"], interactive=True)


def build_chroot_steps(ctx: InstallContext) -> List[Step]:
    cfg = ctx.config
    return [
        CommandStep(
            "timezone",
            f"Set time zone to {cfg.timezone}",
            ["ln", "-sf", f"/usr/share/zoneinfo/{cfg.timezone}", "/etc/localtime"],
        ),
        CommandStep("hwclock", "Sync hardware clock", ["hwclock", "--systohc"]),
        LocaleStep(),
        VconsoleStep(),
        HostnameStep(),
        RootPasswordStep(),
        CreateUserStep(),
        SudoersStep(),
        CommandStep("network_manager", "Enable NetworkManager", ["systemctl", "enable", "NetworkManager"]),
        CommandStep(
            "grub_install",
            "Install GRUB for UEFI",
            [
                "grub-install",
                "--target=x86_64-efi",
                "--efi-directory=/boot",
                f"--bootloader-id={cfg.bootloader_id}",
            ],
        ),
        CommandStep("grub_config", "Write GRUB config", ["grub-mkconfig", "-o", "/boot/grub/grub.cfg"]),
    ]


class ChrootConfigureStep:
    """Configure the new system from inside its root.

    Runs its own step sequence with its own prompts; the nested sequence
    failing makes this single step fail.
    """

    step_id = "80_chroot_config"
    description = "Configure the installed system inside arch-chroot"
    irreversible = False

    def run(self, ctx: InstallContext) -> None:
        ctx.prompts.say("Entering chroot environment...")
        nested = ctx.nested(exec_root=ctx.target_root, prompts=InputCollector(name="chroot"))

        result = run_pipeline(ctx=nested, steps=build_chroot_steps(nested))
        if not result.ok:
            err = result.error
            raise StepFailure(
                f"chroot step {result.failed_step} failed: {err}",
                output=err.output if err is not None else "",
            )
        logger.info("Chroot configuration complete (%s)", ", ".join(result.ran_steps))
