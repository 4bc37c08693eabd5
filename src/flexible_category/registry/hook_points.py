"""
Extension point names.

These names are the public contract plugins register against.
"""

# Host entry point replaced by FlexibleCategoryPage
CATEGORY_PAGE_VIEW = "CategoryPageView"

# Page level
PAGE_VIEW = "FlexibleCategoryPageView"
OPEN_SHOW_CATEGORY = "FlexibleCategoryPage::openShowCategory"
CLOSE_SHOW_CATEGORY = "FlexibleCategoryPage::closeShowCategory"

# Viewer lifecycle
VIEWER_INIT = "FlexibleCategoryViewer::init"
DO_CATEGORY_QUERY = "FlexibleCategoryViewer::doCategoryQuery"

# Viewer sections, in rendering order
CATEGORY_TOP = "FlexibleCategoryViewer::getCategoryTop"
SUBCATEGORY_SECTION = "FlexibleCategoryViewer::getSubcategorySection"
PAGES_SECTION = "FlexibleCategoryViewer::getPagesSection"
IMAGE_SECTION = "FlexibleCategoryViewer::getImageSection"
OTHER_SECTION = "FlexibleCategoryViewer::getOtherSection"
CATEGORY_BOTTOM = "FlexibleCategoryViewer::getCategoryBottom"

SECTION_POINTS = (
    CATEGORY_TOP,
    SUBCATEGORY_SECTION,
    PAGES_SECTION,
    IMAGE_SECTION,
    OTHER_SECTION,
    CATEGORY_BOTTOM,
)

ALL_POINTS = (
    CATEGORY_PAGE_VIEW,
    PAGE_VIEW,
    OPEN_SHOW_CATEGORY,
    CLOSE_SHOW_CATEGORY,
    VIEWER_INIT,
    DO_CATEGORY_QUERY,
) + SECTION_POINTS
