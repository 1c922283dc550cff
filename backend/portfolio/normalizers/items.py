def _timestamps(row):
    return {
        "createdAt": row.created_at.isoformat() if row.created_at else None,
        "updatedAt": row.updated_at.isoformat() if row.updated_at else None,
    }


def normalize_text_block(block):
    return {
        "id": block.id,
        "sectionId": block.section_id,
        "content": block.content,
        "order": block.order,
        "fontSize": block.font_size,
        "fontFamily": block.font_family,
        **_timestamps(block),
    }


def normalize_image_block(block):
    return {
        "id": block.id,
        "sectionId": block.section_id,
        "src": block.src,
        "imagePublicId": block.image_public_id,
        "alt": block.alt,
        "caption": block.caption,
        "width": block.width,
        "height": block.height,
        "order": block.order,
        **_timestamps(block),
    }


def normalize_custom_block(block):
    return {
        "id": block.id,
        "sectionId": block.section_id,
        "type": block.type,
        "content": block.content,
        "imageSrc": block.image_src,
        "imageAlt": block.image_alt,
        "imagePublicId": block.image_public_id,
        "linkUrl": block.link_url,
        "fontSize": block.font_size,
        "fontWeight": block.font_weight,
        "fontStyle": block.font_style,
        "textAlign": block.text_align,
        "order": block.order,
        **_timestamps(block),
    }


def normalize_project(project):
    return {
        "id": project.id,
        "sectionId": project.section_id,
        "projectNumber": project.project_number,
        "title": project.title,
        "companyName": project.company_name,
        "description1": project.description1,
        "description2": project.description2,
        "imageSrc": project.image_src,
        "imageAlt": project.image_alt,
        "imagePublicId": project.image_public_id,
        "liveLink": project.live_link,
        "sourceLink": project.source_link,
        "layout": project.layout,
        "categoryIds": project.category_ids,
        "order": project.order,
        **_timestamps(project),
    }


def normalize_skill(skill):
    return {
        "id": skill.id,
        "sectionId": skill.section_id,
        "title": skill.title,
        "description": skill.description,
        "level": skill.level,
        "order": skill.order,
        **_timestamps(skill),
    }


def normalize_skill_image(image):
    return {
        "id": image.id,
        "sectionId": image.section_id,
        "src": image.src,
        "imagePublicId": image.image_public_id,
        "alt": image.alt,
        "order": image.order,
        **_timestamps(image),
    }


def normalize_experience_image(image):
    return {
        "id": image.id,
        "experienceItemId": image.experience_item_id,
        "src": image.src,
        "imagePublicId": image.image_public_id,
        "alt": image.alt,
        "caption": image.caption,
        "order": image.order,
        **_timestamps(image),
    }


def normalize_experience(item):
    return {
        "id": item.id,
        "sectionId": item.section_id,
        "positionTitle": item.position_title,
        "companyName": item.company_name,
        "period": item.period,
        "summary": item.summary,
        "description": item.description,
        "imageSrc": item.image_src,
        "imagePublicId": item.image_public_id,
        "order": item.order,
        "detailImages": [normalize_experience_image(i) for i in item.detail_images],
        **_timestamps(item),
    }


def normalize_education_image(image):
    return {
        "id": image.id,
        "educationItemId": image.education_item_id,
        "src": image.src,
        "imagePublicId": image.image_public_id,
        "alt": image.alt,
        "order": image.order,
        **_timestamps(image),
    }


def normalize_education(item):
    return {
        "id": item.id,
        "sectionId": item.section_id,
        "institution": item.institution,
        "degree": item.degree,
        "period": item.period,
        "description": item.description,
        "order": item.order,
        "images": [normalize_education_image(i) for i in item.images],
        **_timestamps(item),
    }


def normalize_testimonial(item):
    return {
        "id": item.id,
        "sectionId": item.section_id,
        "clientName": item.client_name,
        "role": item.role,
        "company": item.company,
        "content": item.content,
        "rating": item.rating,
        "imageSrc": item.image_src,
        "imagePublicId": item.image_public_id,
        "order": item.order,
        **_timestamps(item),
    }


def normalize_contact_info(item):
    return {
        "id": item.id,
        "sectionId": item.section_id,
        "type": item.type,
        "value": item.value,
        "label": item.label,
        "order": item.order,
        **_timestamps(item),
    }
