class RecipeError(Exception):
    """Base class for failures reported to the caller as ``{"error": ...}``.

    Subclasses pin the HTTP status; the message is the human-readable text
    placed in the response body.
    """

    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidBody(RecipeError):
    status_code = 400
    default_message = "Invalid JSON body"


class IncompleteRecipe(RecipeError):
    status_code = 400
    default_message = "Missing required fields"


class InvalidTaxonomy(RecipeError):
    status_code = 422
    default_message = "Invalid category/subcategory"


class MissingRecipeId(RecipeError):
    status_code = 400
    default_message = "Missing id"


class DuplicateRecipeId(RecipeError):
    status_code = 409
    default_message = "Recipe id already exists"


class StorageError(RecipeError):
    status_code = 500
    default_message = "Storage operation failed"
