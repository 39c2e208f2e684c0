"""
============================================================
 File: settings.py
 Author: Internal Systems Automation Team
 Created: 2026-10-12
 Last Updated: 2026-10-18

 Description:
     Impostazioni statiche del progetto. Contiene le liste
     di pacchetti di default, gli URL dei repository esterni
     e i percorsi usati dai flussi di installazione.
     I valori possono essere sovrascritti da config.ini.
============================================================
"""

APP_NAME = "desktop-setup"
LOG_FILE_NAME = "desktop-setup.log"
LOGS_DIRECTORY = "~/.local/state/desktop-setup"

SUDO_COMMAND = "sudo"
DNF_COMMAND = "dnf"
FLATPAK_COMMAND = "flatpak"

INSTALL_PACKAGES = ("git", "curl")

REMOVE_PACKAGES = (
    # GNOME
    "firefox", "baobab", "evince", "epiphany", "gnome-abrt",
    "gnome-calendar", "gnome-clocks", "gnome-color-manager",
    "gnome-connections", "gnome-console", "gnome-contacts",
    "gnome-weather", "gnome-logs", "gnome-maps", "gnome-music",
    "gnome-tour", "gnome-remote-desktop", "gnome-shell-extensions",
    "gnome-user-docs", "gnome-user-share", "totem", "yelp",
    "snapshot", "orca", "simple-scan", "rhythmbox", "gnome-boxes",

    # Input methods
    "ibus-anthy", "ibus-hangul", "ibus-typing-booster", "ibus-libpinyin",
    "im-chooser",

    # KDE
    "kontact", "Akregator", "kmahjongg", "kmines", "kpat",
    "kolourpaint", "skanpage", "khelpcenter", "plasma-welcome",
    "kdebugsettings", "kde-connect", "kmail", "krfb", "krdc",
    "neochat", "dragon", "elisa-player", "kaddressbook", "kamoso",
    "qrca", "korganizer", "kde-partitionmanager", "kjournald",
    "kmouth", "kcharselect", "filelight", "kfind", "kgpg",
    "plasma-drkonqi",

    # Office
    "libreoffice-core", "libreoffice-writer", "libreoffice-draw",
    "libreoffice-calc", "libreoffice-impress", "libreoffice-math",

    # Altro
    "mediawriter", "malcontent-control", "setroubleshoot",
)

FLATPAK_PACKAGES = ("com.mattjakeman.ExtensionManager",)

FLATHUB_REMOTE = "flathub"
FLATHUB_URL = "https://flathub.org/repo/flathub.flatpakrepo"

# NVIDIA
NVIDIA_DEPENDENCIES = ("kmodtool", "akmods", "mokutil", "openssl")
NVIDIA_DRIVER_PACKAGE = "akmod-nvidia"
NVIDIA_CUDA_PACKAGE = "xorg-x11-drv-nvidia-cuda"
MOK_PUBLIC_KEY = "/etc/pki/akmods/certs/public_key.der"
NVIDIA_KERNEL_MODULE = "nvidia"

BRAVE_INSTALL_URL = "https://dl.brave.com/install.sh"

# RPM Fusion: {release} viene sostituito con l'output di `rpm -E %fedora`
RPMFUSION_FREE_URL = (
    "https://mirrors.rpmfusion.org/free/fedora/"
    "rpmfusion-free-release-{release}.noarch.rpm"
)
RPMFUSION_NONFREE_URL = (
    "https://mirrors.rpmfusion.org/nonfree/fedora/"
    "rpmfusion-nonfree-release-{release}.noarch.rpm"
)
OPENH264_REPO_OPTION = "fedora-cisco-openh264.enabled=1"
APPSTREAM_DATA_PACKAGE = "rpmfusion-*-appstream-data"
FFMPEG_FREE_PACKAGE = "ffmpeg-free"
FFMPEG_PACKAGE = "ffmpeg"
MULTIMEDIA_UPDATE_OPTIONS = (
    "--setopt=install_weak_deps=False",
    "--exclude=PackageKit-gstreamer-plugin",
)
VAAPI_PACKAGES = ("libva-nvidia-driver.i686", "libva-nvidia-driver.x86_64")
