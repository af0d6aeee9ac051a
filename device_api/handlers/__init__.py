from .add_device import AddDeviceHandler, lambda_handler

__all__ = ["AddDeviceHandler", "lambda_handler"]
