"""
handlers/menu_handler.py
-------------------------
Numeric console menus for registering, logging in, and managing images.

Every error raised by the services is turned into a message here, and
control always returns to the current menu.
"""

from typing import Callable, Optional

from errors import GalleryError, ImageNotFoundError, StoreConnectionError
from models.user import User
from services.account_service import AccountService
from services.image_service import ImageService
from utils.logger import get_logger

logger = get_logger(__name__)

MAIN_MENU = """
1. Register
2. Login
3. Exit"""

DASHBOARD_MENU = """
1. Upload Image
2. View Images
3. Download Image
4. Logout"""

INVALID_CHOICE = "Invalid choice. Please try again."


class GalleryShell:
    """
    Menu loop over explicitly supplied services.

    Args:
        accounts: Service used for register/login.
        images: Service used for upload/list/download.
        read: Prompt function, ``input`` by default.
        write: Output function, ``print`` by default.
    """

    def __init__(
        self,
        accounts: AccountService,
        images: ImageService,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ):
        self.accounts = accounts
        self.images = images
        self.read = read
        self.write = write

    def run(self) -> None:
        """Show the main menu until the user exits or input ends."""
        try:
            while True:
                self.write(MAIN_MENU)
                choice = self._read_choice()
                if choice == 1:
                    self.register()
                elif choice == 2:
                    user = self.login()
                    if user is not None:
                        self.dashboard(user)
                elif choice == 3:
                    break
                else:
                    self.write(INVALID_CHOICE)
        except EOFError:
            logger.info("Input closed, leaving gallery shell.")
        self.write("Goodbye!")

    # ── ACCOUNT ───────────────────────────────────────────

    def register(self) -> None:
        username = self.read("Enter username: ")
        password = self.read("Enter password: ")
        try:
            self.accounts.register(username, password)
        except GalleryError as e:
            self._report("Error registering user.", e)
            return
        self.write("User registered successfully!")

    def login(self) -> Optional[User]:
        """Prompt for credentials; returns the logged-in User or None."""
        username = self.read("Enter username: ")
        password = self.read("Enter password: ")
        try:
            user = self.accounts.login(username, password)
        except GalleryError as e:
            self._report("Error during login.", e)
            return None
        if user is None:
            self.write("Invalid username or password.")
            return None
        self.write("Login successful!")
        return user

    # ── IMAGES ────────────────────────────────────────────

    def dashboard(self, user: User) -> None:
        """Image menu for a logged-in user; returns on logout."""
        while True:
            self.write(DASHBOARD_MENU)
            choice = self._read_choice()
            if choice == 1:
                self.upload(user.id)
            elif choice == 2:
                self.view()
            elif choice == 3:
                self.download()
            elif choice == 4:
                return
            else:
                self.write(INVALID_CHOICE)

    def upload(self, user_id: int) -> None:
        path = self.read("Enter image file path: ")
        description = self.read("Enter image description: ")
        try:
            image = self.images.upload(user_id, path, description)
        except FileNotFoundError as e:
            self._report("Error uploading image: file not found or unreadable.", e)
            return
        except GalleryError as e:
            self._report("Error uploading image.", e)
            return
        self.write(f"Image uploaded successfully! (ID: {image.id})")

    def view(self) -> None:
        try:
            infos = self.images.list_all()
        except GalleryError as e:
            self._report("Error retrieving images.", e)
            return
        if not infos:
            self.write("No images uploaded yet.")
            return
        for info in infos:
            self.write(str(info))
            self.write("---------------------------")

    def download(self) -> None:
        raw_id = self.read("Enter the image ID to download: ")
        try:
            image_id = int(raw_id.strip())
        except ValueError:
            self.write(f"Invalid image ID: {raw_id!r}")
            return
        output_path = self.read("Enter the file path to save the image: ")
        try:
            target = self.images.download(image_id, output_path)
        except ImageNotFoundError as e:
            self.write(str(e))
            return
        except GalleryError as e:
            self._report("Error downloading image.", e)
            return
        except OSError as e:
            self._report("Error downloading image: file could not be written.", e)
            return
        self.write(f"Image downloaded successfully at: {target}")

    # ── HELPERS ───────────────────────────────────────────

    def _read_choice(self) -> Optional[int]:
        """Read a menu number; None for anything that isn't one."""
        raw = self.read("Choose an option: ")
        try:
            return int(raw.strip())
        except ValueError:
            return None

    def _report(self, message: str, error: Exception) -> None:
        if isinstance(error, StoreConnectionError):
            message = f"{message} The database is unavailable."
        logger.error(f"{message} ({type(error).__name__}: {error})")
        self.write(message)
