import pytest

from wikirights_export.core.labels import ARTICLE_TYPE_LABELS, UNKNOWN_LABEL, map_labels


class TestMapLabels:
    """Page property → label mapping"""

    def test_known_article_type(self):
        labels = map_labels({"ArticleType": "right", "ArticleContentArea": "עבודה"})
        assert labels.article_type_label == "זכות"
        assert labels.content_area_label == "עבודה"

    @pytest.mark.parametrize("properties", [{}, None])
    def test_missing_properties(self, properties):
        labels = map_labels(properties)
        assert labels.article_type_label == UNKNOWN_LABEL
        assert labels.content_area_label == UNKNOWN_LABEL

    def test_unknown_article_type_code(self):
        assert map_labels({"ArticleType": "spaceship"}).article_type_label == UNKNOWN_LABEL

    def test_blank_content_area(self):
        assert map_labels({"ArticleContentArea": "   "}).content_area_label == UNKNOWN_LABEL

    def test_content_area_passes_through_verbatim(self):
        assert map_labels({"ArticleContentArea": "health & welfare"}).content_area_label == "health & welfare"

    def test_code_table_is_closed(self):
        assert len(ARTICLE_TYPE_LABELS) == 19
        assert UNKNOWN_LABEL not in ARTICLE_TYPE_LABELS.values()
