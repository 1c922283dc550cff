def normalize_setting(setting):
    return {
        "id": setting.id,
        "theme": setting.theme,
        "siteTitle": setting.site_title,
        "showPortrait": setting.show_portrait,
        "resumeUrl": setting.resume_url,
        "globalFontFamily": setting.global_font_family,
    }
