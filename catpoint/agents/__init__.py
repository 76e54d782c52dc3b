from .image import ImageService, FakeImageService
from .display import StatusDisplay
