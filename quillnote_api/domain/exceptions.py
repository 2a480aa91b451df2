class StoreKeyError(ValueError):
    pass
