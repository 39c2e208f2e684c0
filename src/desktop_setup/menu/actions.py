"""
============================================================
File: actions.py
Author: Internal Systems Automation Team
Created: 2026-10-13
Last Updated: 2026-10-18

Description:
I flussi richiamabili dal menu principale. Ogni flusso
chiede conferma dove serve, esegue il batch corrispondente
e stampa il riepilogo. Restituisce il BatchSummary, oppure
None se l'operatore ha annullato.
============================================================
"""

from typing import Optional

from rich.console import Console

from desktop_setup.config import settings
from desktop_setup.config.config import PackageLists
from desktop_setup.executor.batch_runner import run_batch, run_steps
from desktop_setup.executor.package_manager import DnfPackageManager, FlatpakManager, SystemTools
from desktop_setup.menu.display import (
    PackageReporter,
    StepReporter,
    print_header,
    print_lines,
    print_package_summary,
    print_steps_summary,
)
from desktop_setup.models.batch_model import BatchSummary, CommandResult, Step
from desktop_setup.utils.logger import logger
from desktop_setup.utils.prompts import ConfirmationGate


class SetupActions:
    def __init__(self, console: Console, gate: ConfirmationGate, packages: PackageLists,
                 dnf: DnfPackageManager, flatpak: FlatpakManager, tools: SystemTools,
                 flatpak_remote=(settings.FLATHUB_REMOTE, settings.FLATHUB_URL)):
        self.console = console
        self.gate = gate
        self.packages = packages
        self.dnf = dnf
        self.flatpak = flatpak
        self.tools = tools
        self.flatpak_remote = flatpak_remote

    def _cancelled(self, message: str):
        logger.info(message)
        self.console.print(f"[blue]{message}[/blue]")

    def install_packages(self) -> BatchSummary:
        print_header(self.console, "INSTALLING SYSTEM PACKAGES")
        summary = run_batch(
            "install",
            self.packages.install,
            self.dnf.install,
            reporter=PackageReporter(self.console, "install"),
        )
        print_package_summary(self.console, summary)
        return summary

    def remove_packages(self) -> Optional[BatchSummary]:
        print_header(self.console, "REMOVING SYSTEM PACKAGES")
        self.console.print("[yellow]The following packages will be removed:[/yellow]")
        print_lines(self.console, self.packages.remove)

        self.console.print()
        if not self.gate.confirm("Are you sure you want to continue?"):
            self._cancelled("Package removal cancelled.")
            return None

        def cleanup() -> CommandResult:
            self.console.print("[yellow]Cleaning up unused dependencies...[/yellow]")
            result = self.dnf.autoremove()
            if not result.ok:
                self.console.print("[red]Failed to clean up unused dependencies[/red]")
            return result

        summary = run_batch(
            "remove",
            self.packages.remove,
            self.dnf.remove,
            reporter=PackageReporter(self.console, "remove"),
            cleanup=cleanup,
        )
        print_package_summary(self.console, summary)
        return summary

    def install_flatpaks(self) -> BatchSummary:
        print_header(self.console, "INSTALLING FLATPAK PACKAGES")

        name, url = self.flatpak_remote
        if not self.flatpak.add_remote(name, url).ok:
            self.console.print(f"[red]Failed to add the {name} remote, installs may fail[/red]")

        summary = run_batch(
            "install",
            self.packages.flatpak,
            self.flatpak.install,
            reporter=PackageReporter(self.console, "install", label="Flatpak package: "),
        )
        print_package_summary(self.console, summary)
        return summary

    def nvidia_steps(self):
        return [
            Step(
                "Dependencies installation",
                lambda: self.dnf.install(*settings.NVIDIA_DEPENDENCIES),
                progress="Installing required dependencies",
                success="Dependencies installed successfully",
                failure="Failed to install required dependencies",
            ),
            Step(
                "MOK generation",
                self.tools.generate_signing_key,
                progress="Generating and importing MOK for Secure Boot",
                success="MOK generated successfully",
                failure="Failed to generate MOK",
            ),
            Step(
                "MOK import",
                lambda: self.tools.enroll_key(settings.MOK_PUBLIC_KEY),
                progress="Importing MOK",
                notice="Please enter your password to proceed with MOK enrollment...",
                success="MOK imported successfully",
                failure="Failed to import MOK",
            ),
            Step(
                "NVIDIA drivers installation",
                lambda: self.dnf.install(settings.NVIDIA_DRIVER_PACKAGE),
                progress="Installing NVIDIA drivers",
                success="NVIDIA drivers installed successfully",
                failure="Failed to install NVIDIA drivers",
            ),
            Step(
                "CUDA support installation",
                lambda: self.dnf.install(settings.NVIDIA_CUDA_PACKAGE),
                progress="Installing CUDA support",
                success="CUDA support installed successfully",
                failure="Failed to install CUDA support",
            ),
            Step(
                "Driver verification",
                lambda: self.tools.module_version(settings.NVIDIA_KERNEL_MODULE),
                progress="Verifying installation",
                success="NVIDIA driver verification successful",
                failure="Failed to verify NVIDIA driver installation",
            ),
        ]

    def install_nvidia(self) -> Optional[BatchSummary]:
        print_header(self.console, "INSTALLING NVIDIA GRAPHICS DRIVERS")
        self.console.print("[yellow]This will install NVIDIA drivers and related packages.[/yellow]")
        if not self.gate.confirm("Are you sure you have an NVIDIA GPU?"):
            self._cancelled("NVIDIA driver installation cancelled.")
            return None

        summary = run_steps("nvidia", self.nvidia_steps(), reporter=StepReporter(self.console))
        print_steps_summary(self.console, summary, "NVIDIA installation", "NVIDIA graphics installation complete.")
        self.console.print("[yellow]You may need to reboot for changes to take effect.[/yellow]")
        return summary

    def install_brave(self) -> Optional[BatchSummary]:
        print_header(self.console, "INSTALLING BRAVE BROWSER")
        self.console.print("[yellow]This will install Brave browser from their official repository.[/yellow]")
        if not self.gate.confirm("Do you want to continue?"):
            self._cancelled("Brave installation cancelled.")
            return None

        self.console.print("[yellow]Installing Brave browser...[/yellow]")
        result = self.tools.fetch_and_execute(settings.BRAVE_INSTALL_URL)
        if result.ok:
            self.console.print("[green]Brave browser installation complete.[/green]")
            return BatchSummary(kind="brave", total=1)
        self.console.print("[red]Failed to install Brave browser.[/red]")
        return BatchSummary(kind="brave", total=1, failed=("Brave browser installation",))

    def _install_rpmfusion_repos(self) -> CommandResult:
        release = self.dnf.release_version()
        version = release.stdout.strip()
        if not release.ok:
            return release
        if not version:
            logger.error("Impossibile determinare la versione di Fedora")
            return CommandResult(argv=release.argv, returncode=1)
        return self.dnf.install(
            settings.RPMFUSION_FREE_URL.format(release=version),
            settings.RPMFUSION_NONFREE_URL.format(release=version),
        )

    def rpmfusion_steps(self):
        return [
            Step(
                "RPM Fusion repositories installation",
                self._install_rpmfusion_repos,
                progress="Installing RPM Fusion repositories",
                success="RPM Fusion repositories installed successfully",
                failure="Failed to install RPM Fusion repositories",
            ),
            Step(
                "Cisco OpenH264 enablement",
                lambda: self.dnf.set_option(settings.OPENH264_REPO_OPTION),
                progress="Enabling Cisco OpenH264",
                success="Cisco OpenH264 enabled successfully",
                failure="Failed to enable Cisco OpenH264",
            ),
            Step(
                "Core packages update",
                lambda: self.dnf.update("@core"),
                progress="Updating core packages",
                success="Core packages updated successfully",
                failure="Failed to update core packages",
            ),
            Step(
                "AppStream data installation",
                lambda: self.dnf.install(settings.APPSTREAM_DATA_PACKAGE),
                progress="Installing AppStream data",
                success="AppStream data installed successfully",
                failure="Failed to install AppStream data",
            ),
            Step(
                "ffmpeg swap",
                lambda: self.dnf.swap(settings.FFMPEG_FREE_PACKAGE, settings.FFMPEG_PACKAGE, allow_erasing=True),
                progress="Swapping ffmpeg versions",
                success="ffmpeg swapped successfully",
                failure="Failed to swap ffmpeg",
            ),
            Step(
                "Multimedia packages update",
                lambda: self.dnf.update("@multimedia", options=settings.MULTIMEDIA_UPDATE_OPTIONS),
                progress="Updating multimedia packages",
                success="Multimedia packages updated successfully",
                failure="Failed to update multimedia packages",
            ),
            Step(
                "NVIDIA VAAPI driver installation",
                lambda: self.dnf.install(*settings.VAAPI_PACKAGES),
                progress="Installing NVIDIA VAAPI driver",
                success="NVIDIA VAAPI driver installed successfully",
                failure="Failed to install NVIDIA VAAPI driver",
            ),
        ]

    def install_rpmfusion(self) -> Optional[BatchSummary]:
        print_header(self.console, "INSTALLING RPM FUSION REPOSITORIES")
        self.console.print("[yellow]This will install RPM Fusion free and non-free repositories.[/yellow]")
        if not self.gate.confirm("Do you want to continue?"):
            self._cancelled("RPM Fusion installation cancelled.")
            return None

        # Best-effort: nessun rollback, i passi successivi vengono comunque tentati
        summary = run_steps("rpmfusion", self.rpmfusion_steps(), reporter=StepReporter(self.console))
        print_steps_summary(self.console, summary, "RPM Fusion setup", "RPM Fusion setup complete.")
        return summary
