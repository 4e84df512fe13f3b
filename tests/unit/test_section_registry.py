"""Tests for section ordering, visibility and custom section management."""

import itertools

import pytest

from quill.contexts.document import ResumeValidationError, Section, SectionIndexError, default_sections
from quill.contexts.sections import (
    SECTION_TITLE_REQUIRED,
    CustomContent,
    ExperienceContent,
    SkillsContent,
    append_custom_section,
    find_section,
    ordered_blocks,
    remove_section,
    reorder,
    resolve_content,
    sort_sections,
    toggle_visibility,
    update_custom_content,
    visible_sections,
)


def _section(section_id, order, section_type="custom", visible=True):
    return Section(id=section_id, title=section_id.title(), type=section_type, content="", visible=visible, order=order)


class TestSorting:
    """order is a sort key with a stable tie-break on array position."""

    @pytest.mark.unit
    def test_sorted_by_order(self):
        sections = [_section("c", 7), _section("a", -1), _section("b", 3)]
        assert [s.id for s in sort_sections(sections)] == ["a", "b", "c"]

    @pytest.mark.unit
    def test_ties_keep_array_position(self):
        sections = [_section("first", 1), _section("second", 0), _section("third", 1)]
        assert [s.id for s in sort_sections(sections)] == ["second", "first", "third"]

    @pytest.mark.unit
    def test_visible_sections_filters_hidden(self):
        sections = [_section("a", 0), _section("b", 1, visible=False), _section("c", 2)]
        assert [s.id for s in visible_sections(sections)] == ["a", "c"]

    @pytest.mark.unit
    def test_accepts_wire_dicts(self):
        sections = [
            {"id": "b", "title": "B", "type": "custom", "content": "", "visible": True, "order": 1},
            {"id": "a", "title": "A", "type": "custom", "content": "", "visible": True, "order": 0},
        ]
        assert [s.id for s in sort_sections(sections)] == ["a", "b"]

    @pytest.mark.unit
    def test_find_section(self):
        sections = default_sections()
        assert find_section(sections, sections[2].id).type == "education"
        assert find_section(sections, "missing") is None


class TestReorder:
    """reorder moves within the sorted view and renormalizes to 0..n-1."""

    @pytest.mark.unit
    def test_move_down(self):
        sections = [_section("a", 0), _section("b", 1), _section("c", 2), _section("d", 3)]
        result = reorder(sections, 0, 2)
        assert [s.id for s in result] == ["b", "c", "a", "d"]
        assert [s.order for s in result] == [0, 1, 2, 3]

    @pytest.mark.unit
    def test_indices_refer_to_sorted_view(self):
        # Array order differs from display order; gaps and duplicates in `order`
        sections = [_section("c", 10), _section("a", 0), _section("b", 10)]
        result = reorder(sections, 2, 0)
        assert [s.id for s in result] == ["b", "a", "c"]
        assert [s.order for s in result] == [0, 1, 2]

    @pytest.mark.unit
    def test_every_permutation_renormalizes(self):
        ids = ["a", "b", "c", "d"]
        for from_index, to_index in itertools.product(range(4), repeat=2):
            sections = [_section(section_id, order * 5) for order, section_id in enumerate(ids)]
            result = reorder(sections, from_index, to_index)

            expected = list(ids)
            expected.insert(to_index, expected.pop(from_index))
            assert [s.id for s in sort_sections(result)] == expected
            assert sorted(s.order for s in result) == [0, 1, 2, 3]

    @pytest.mark.unit
    def test_input_not_mutated(self):
        sections = [_section("a", 5), _section("b", 9)]
        reorder(sections, 1, 0)
        assert [s.order for s in sections] == [5, 9]

    @pytest.mark.unit
    @pytest.mark.parametrize("from_index,to_index", [(-1, 0), (0, 3), (3, 0)])
    def test_out_of_range_index(self, from_index, to_index):
        sections = [_section("a", 0), _section("b", 1), _section("c", 2)]
        with pytest.raises(SectionIndexError):
            reorder(sections, from_index, to_index)


class TestToggleVisibility:
    """toggle_visibility flips one section by id."""

    @pytest.mark.unit
    def test_flips_only_matching_section(self):
        sections = default_sections()
        result = toggle_visibility(sections, sections[1].id)
        assert [s.visible for s in result] == [True, False, True, True]
        assert [s.order for s in result] == [s.order for s in sections]

    @pytest.mark.unit
    def test_toggle_twice_is_identity(self):
        sections = default_sections()
        target = sections[3].id
        assert toggle_visibility(toggle_visibility(sections, target), target) == sections

    @pytest.mark.unit
    def test_unknown_id_is_noop(self):
        sections = default_sections()
        assert toggle_visibility(sections, "missing") == sections

    @pytest.mark.unit
    def test_input_not_mutated(self):
        sections = default_sections()
        toggle_visibility(sections, sections[0].id)
        assert sections[0].visible is True


class TestCustomSections:
    """Appending, editing and removing custom sections."""

    @pytest.mark.unit
    def test_append_custom_section(self):
        sections = default_sections()
        result = append_custom_section(sections, "Publications")

        new_section = result[-1]
        assert len(result) == 5
        assert new_section.title == "Publications"
        assert new_section.type == "custom"
        assert new_section.content == ""
        assert new_section.visible is True
        assert new_section.order == 4
        assert new_section.id not in {s.id for s in sections}

    @pytest.mark.unit
    def test_order_is_current_count_even_with_gaps(self):
        sections = [_section("a", 0), _section("b", 40)]
        assert append_custom_section(sections, "Awards")[-1].order == 2

    @pytest.mark.unit
    @pytest.mark.parametrize("title", ["", "   ", None])
    def test_blank_title_rejected(self, title):
        sections = default_sections()
        before = [s.model_copy() for s in sections]

        with pytest.raises(ResumeValidationError) as exc_info:
            append_custom_section(sections, title)

        assert exc_info.value.message == SECTION_TITLE_REQUIRED
        assert sections == before

    @pytest.mark.unit
    def test_update_custom_content(self):
        sections = append_custom_section(default_sections(), "Awards")
        custom_id = sections[-1].id
        result = update_custom_content(sections, custom_id, "Royal Society medal")
        assert result[-1].content == "Royal Society medal"
        assert sections[-1].content == ""

    @pytest.mark.unit
    def test_update_built_in_content_rejected(self):
        sections = default_sections()
        with pytest.raises(ResumeValidationError):
            update_custom_content(sections, sections[0].id, "text")

    @pytest.mark.unit
    def test_remove_custom_section(self):
        sections = append_custom_section(default_sections(), "Awards")
        result = remove_section(sections, sections[-1].id)
        assert [s.type for s in result] == ["summary", "experience", "education", "skills"]

    @pytest.mark.unit
    def test_remove_built_in_rejected(self):
        sections = default_sections()
        with pytest.raises(ResumeValidationError):
            remove_section(sections, sections[0].id)

    @pytest.mark.unit
    def test_remove_unknown_id_is_noop(self):
        sections = default_sections()
        assert remove_section(sections, "missing") == sections


class TestSectionContent:
    """Each section resolves to a content variant tagged by its type."""

    @pytest.mark.unit
    def test_built_in_content_comes_from_resume_fields(self, ada_resume):
        experience = resolve_content(ada_resume.sections[1], ada_resume)
        assert isinstance(experience, ExperienceContent)
        assert experience.kind == "experience"
        assert [entry.employer for entry in experience.entries] == ["Acme", "Babbage & Co"]

        skills = resolve_content(ada_resume.sections[3], ada_resume)
        assert isinstance(skills, SkillsContent)
        assert skills.technical == ["C++", "Python"]

    @pytest.mark.unit
    def test_custom_content_owns_its_text(self, ada_resume):
        custom = resolve_content(ada_resume.sections[4], ada_resume)
        assert isinstance(custom, CustomContent)
        assert custom.text == "Notes on the Analytical Engine"

    @pytest.mark.unit
    def test_unknown_type_resolves_to_none(self, ada_resume):
        assert resolve_content(_section("odd", 0, section_type="timeline"), ada_resume) is None

    @pytest.mark.unit
    def test_ordered_blocks_follow_order_and_visibility(self, ada_resume):
        sections = reorder(ada_resume.sections, 4, 0)
        sections = toggle_visibility(sections, "sec-education")
        resume = ada_resume.model_copy(update={"sections": sections})

        assert [block.kind for block in ordered_blocks(resume)] == ["custom", "summary", "experience", "skills"]

    @pytest.mark.unit
    def test_duplicate_built_in_renders_once_per_descriptor(self, ada_resume):
        extra = Section(id="sec-skills-2", title="More Skills", type="skills", visible=True, order=9)
        resume = ada_resume.model_copy(update={"sections": ada_resume.sections + [extra]})
        assert [block.kind for block in ordered_blocks(resume)].count("skills") == 2
