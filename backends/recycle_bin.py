"""Read-only view of the Windows Recycle Bin through the shell namespace."""

from __future__ import annotations

from typing import List

from .base import TrashError, TrashItem


def list_items() -> List[TrashItem]:
    # pywin32 only installs on Windows.
    import pythoncom  # type: ignore
    from win32com.shell import shell, shellcon  # type: ignore

    # Runs on executor threads, which have no COM apartment of their own.
    pythoncom.CoInitialize()
    try:
        desktop = shell.SHGetDesktopFolder()
        pidl = shell.SHGetSpecialFolderLocation(0, shellcon.CSIDL_BITBUCKET)
        bin_folder = desktop.BindToObject(pidl, None, shell.IID_IShellFolder)
        flags = shellcon.SHCONTF_FOLDERS | shellcon.SHCONTF_NONFOLDERS
        return [
            TrashItem(name=bin_folder.GetDisplayNameOf(item_pidl, shellcon.SHGDN_NORMAL))
            for item_pidl in bin_folder.EnumObjects(0, flags) or ()
        ]
    except pythoncom.com_error as exc:
        raise TrashError(str(exc)) from exc
    finally:
        pythoncom.CoUninitialize()
