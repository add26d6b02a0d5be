"""Request and response models, errors and model names for the v1 HTTP API."""