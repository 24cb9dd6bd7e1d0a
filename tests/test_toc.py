"""
Table-of-contents block removal tests
"""

from mdpost.lib.postprocessors import toc_remove
from mdpost.models.context import PostprocessorResult
from mdpost.models.events import Event, Tag, TagKind


HEADING = Tag(kind=TagKind.HEADING)
PARAGRAPH = Tag(kind=TagKind.PARAGRAPH)


def surrounded(*inner):
    """Wrap events between a heading and a paragraph"""
    return [
        Event.start(HEADING),
        Event.text_make("Title"),
        Event.end(HEADING),
        *inner,
        Event.start(PARAGRAPH),
        Event.text_make("Body"),
        Event.end(PARAGRAPH),
    ]


class TestShortLabel:
    """Test ```toc blocks"""

    def test_both_markers_removed(self, context):
        """Start and End of a ```toc block are both dropped"""
        toc = Tag.codeBlock_fenced("toc")
        events = surrounded(Event.start(toc), Event.end(toc))

        result = toc_remove(context, events)

        assert result is PostprocessorResult.CONTINUE
        assert events == surrounded()

    def test_inner_content_passes_through(self, context):
        """Events between the markers are not filtered"""
        toc = Tag.codeBlock_fenced("toc")
        events = [Event.start(toc), Event.text_make("max-depth: 2\n"), Event.end(toc)]

        toc_remove(context, events)

        assert events == [Event.text_make("max-depth: 2\n")]

    def test_multiple_blocks(self, context):
        """Every ```toc block in the document is removed"""
        toc = Tag.codeBlock_fenced("toc")
        events = [Event.start(toc), Event.end(toc), Event.rule(), Event.start(toc), Event.end(toc)]

        toc_remove(context, events)

        assert events == [Event.rule()]


class TestLongLabel:
    """Test ```table-of-contents blocks"""

    def test_start_removed_end_kept(self, context):
        """Only the Start marker is dropped; the End marker remains"""
        toc = Tag.codeBlock_fenced("table-of-contents")
        events = surrounded(Event.start(toc), Event.end(toc))

        toc_remove(context, events)

        assert events == surrounded(Event.end(toc))


class TestOtherBlocks:
    """Test blocks that must be left alone"""

    def test_other_labels_untouched(self, context):
        """Fenced blocks with other labels are kept"""
        for label in ("python", "TOC", "toc ", "contents", None):
            tag = Tag.codeBlock_fenced(label)
            events = [Event.start(tag), Event.text_make("code"), Event.end(tag)]
            expected = list(events)

            toc_remove(context, events)

            assert events == expected, label

    def test_indented_block_untouched(self, context):
        """Indented code blocks are never directive blocks"""
        tag = Tag.codeBlock_indented()
        events = [Event.start(tag), Event.text_make("toc"), Event.end(tag)]
        expected = list(events)

        toc_remove(context, events)

        assert events == expected

    def test_text_mentioning_toc_untouched(self, context, run_state):
        """Plain text is never affected"""
        events = surrounded(Event.text_make("toc"), Event.code_make("table-of-contents"))
        expected = list(events)

        toc_remove(context, events)

        assert events == expected
