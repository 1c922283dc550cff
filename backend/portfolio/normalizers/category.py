def normalize_category(category):
    return {
        "id": category.id,
        "name": category.name,
        "order": category.order,
        "projectIds": category.project_ids,
    }
