# -*- coding: utf-8 -*-
import random

from ..util import getLogger


LOGGER = getLogger(__name__)


class ImageService(object):

    def image_contains_cat(self, image, confidence_threshold):
        """
        Return whether ``image`` shows a cat with a confidence of at least
        ``confidence_threshold`` percent.
        """
        raise NotImplementedError()


class FakeImageService(ImageService):
    """
    Stand-in classifier answering at random whatever the image, for running
    the alarm without a detection model.
    """

    def __init__(self, seed=None):
        self.random = random.Random(None if seed in (None, "") else int(seed))

    def image_contains_cat(self, image, confidence_threshold):
        cat = self.random.random() * 100 >= confidence_threshold
        LOGGER.debug("Fake classification at threshold %s: %s", confidence_threshold, cat)
        return cat
