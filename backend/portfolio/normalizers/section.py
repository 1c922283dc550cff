from .items import (
    normalize_text_block,
    normalize_image_block,
    normalize_custom_block,
    normalize_project,
    normalize_skill,
    normalize_skill_image,
    normalize_experience,
    normalize_education,
    normalize_testimonial,
    normalize_contact_info,
)

# (response key, relationship attribute, normalizer)
NESTED_COLLECTIONS = (
    ("textBlocks", "text_blocks", normalize_text_block),
    ("imageBlocks", "image_blocks", normalize_image_block),
    ("projectItems", "project_items", normalize_project),
    ("skillItems", "skill_items", normalize_skill),
    ("skillImages", "skill_images", normalize_skill_image),
    ("experienceItems", "experience_items", normalize_experience),
    ("educationItems", "education_items", normalize_education),
    ("testimonialItems", "testimonial_items", normalize_testimonial),
    ("contactInfoItems", "contact_info_items", normalize_contact_info),
    ("customSectionContentBlocks", "custom_blocks", normalize_custom_block),
)


def normalize_section(section, include_content=False):
    data = {
        "id": section.id,
        "slug": section.slug,
        "title": section.title,
        "type": section.type,
        "order": section.order,
        "visible": section.visible,
        "settings": section.settings or {},
    }

    if include_content:
        for key, attribute, normalize in NESTED_COLLECTIONS:
            rows = sorted(getattr(section, attribute), key=lambda r: r.order)
            data[key] = [normalize(row) for row in rows]

    return data
