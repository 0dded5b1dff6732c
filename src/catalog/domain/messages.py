"""
Client-facing catalog messages (kept byte-for-byte stable).
"""

# Categories
CATEGORY_NAME_REQUIRED = "Name is required"
CATEGORY_EXISTS = "Category Already Exisits"
CATEGORY_CREATED = "new category created"
CATEGORY_CREATE_FAILED = "Errro in Category"
CATEGORY_UPDATED = "Category Updated Successfully"
CATEGORY_UPDATE_FAILED = "Error while updating category"
CATEGORY_LIST = "All Categories List"
CATEGORY_LIST_FAILED = "Error while getting all categories"
CATEGORY_SINGLE = "Get SIngle Category SUccessfully"
CATEGORY_SINGLE_FAILED = "Error While getting Single Category"
CATEGORY_DELETED = "Categry Deleted Successfully"
CATEGORY_DELETE_FAILED = "error while deleting category"

# Products
PRODUCT_NAME_REQUIRED = "Name is Required"
PRODUCT_DESCRIPTION_REQUIRED = "Description is Required"
PRODUCT_PRICE_REQUIRED = "Price is Required"
PRODUCT_CATEGORY_REQUIRED = "Category is Required"
PRODUCT_QUANTITY_REQUIRED = "Quantity is Required"
PRODUCT_CREATED = "Product Created Successfully"
PRODUCT_CREATE_FAILED = "Error in crearing product"
PRODUCT_UPDATED = "Product Updated Successfully"
PRODUCT_UPDATE_FAILED = "Error in Updte product"
PRODUCT_DELETED = "Product Deleted successfully"
PRODUCT_DELETE_FAILED = "Error while deleting product"
PRODUCT_LIST = "ALlProducts "
PRODUCT_LIST_FAILED = "Erorr in getting products"
PRODUCT_SINGLE = "Single Product Fetched"
PRODUCT_SINGLE_FAILED = "Eror while getitng single product"
PRODUCT_FILTER_FAILED = "Error WHile Filtering Products"
PRODUCT_COUNT_FAILED = "Error in product count"
PRODUCT_RELATED_FAILED = "error while geting related product"
PRODUCT_BY_CATEGORY_FAILED = "Error While Getting products"
PRODUCT_SEARCH_FAILED = "Error In Search Product API"

PRODUCT_LIST_LIMIT = 12
RELATED_PRODUCT_LIMIT = 3
