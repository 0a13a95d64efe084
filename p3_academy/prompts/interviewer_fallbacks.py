"""
Static interviewer text used when no AI provider answers.

Strings with ``{job_role}`` and ``{company}`` placeholders are filled with ``str.format``.
"""

FIRST_QUESTION_FALLBACKS = {
    "en": "Tell me about yourself and why you're interested in the {job_role} position at {company}.",
    "id": "Ceritakan tentang diri Anda dan mengapa Anda tertarik dengan posisi {job_role} di {company}.",
    "ms": "Ceritakan tentang diri anda dan mengapa anda berminat dengan jawatan {job_role} di {company}.",
    "th": "เล่าเกี่ยวกับตัวคุณและเหตุผลที่สนใจตำแหน่ง {job_role} ที่ {company}",
    "vi": "Hãy kể về bản thân và lý do bạn quan tâm đến vị trí {job_role} tại {company}.",
    "zh-sg": "请介绍一下您自己，以及您为什么对{company}的{job_role}职位感兴趣。",
}

# Keyed by language, then by question number (2-5)
CONTEXTUAL_FOLLOW_UPS = {
    "zh-sg": {
        2: [
            "很好。您能详细描述一个您在团队协作中发挥关键作用的项目吗？",
            "有趣的背景。您如何看待在多元文化环境中工作的挑战？",
            "请分享一个您必须快速适应新技术或流程的经历。",
        ],
        3: [
            "让我们谈谈领导力。您能描述一次您领导团队克服困难的经历吗？",
            "在快节奏的环境中，您如何确保工作质量和效率的平衡？",
            "请告诉我您如何处理项目中的不确定性和变化。",
        ],
        4: [
            "您对我们公司在东南亚市场的发展有什么了解和想法？",
            "如果要您向客户解释复杂的技术概念，您会如何处理？",
            "描述一下您理想的职业发展道路是什么样的。",
        ],
        5: [
            "在处理跨国项目时，您如何管理不同时区和文化差异？",
            "您如何保持对行业趋势的敏感度并持续学习新技能？",
            "描述一次您需要在资源有限的情况下完成重要任务的经历。",
        ],
    },
    "id": {
        2: [
            "Bagus sekali. Bisakah Anda menceritakan proyek di mana Anda berperan penting dalam kolaborasi tim?",
            "Latar belakang yang menarik. Bagaimana pandangan Anda tentang tantangan bekerja di lingkungan multikultural?",
            "Ceritakan pengalaman ketika Anda harus cepat beradaptasi dengan teknologi atau proses baru.",
        ],
        3: [
            "Mari bicara tentang kepemimpinan. Bisa ceritakan saat Anda memimpin tim mengatasi kesulitan?",
            "Di lingkungan yang bergerak cepat, bagaimana Anda menjaga keseimbangan kualitas dan efisiensi kerja?",
            "Tolong jelaskan bagaimana Anda menangani ketidakpastian dan perubahan dalam proyek.",
        ],
        4: [
            "Apa pemahaman dan ide Anda tentang perkembangan perusahaan kami di pasar Asia Tenggara?",
            "Jika diminta menjelaskan konsep teknis yang kompleks kepada klien, bagaimana Anda menanganinya?",
            "Gambarkan seperti apa jalur pengembangan karier ideal menurut Anda.",
        ],
        5: [
            "Dalam menangani proyek multinasional, bagaimana Anda mengelola perbedaan zona waktu dan budaya?",
            "Bagaimana cara Anda tetap peka terhadap tren industri dan terus belajar keterampilan baru?",
            "Ceritakan saat Anda harus menyelesaikan tugas penting dengan sumber daya terbatas.",
        ],
    },
    "th": {
        2: [
            "ดีมาก คุณช่วยเล่าโครงการที่คุณมีบทบาทสำคัญในการทำงานร่วมกันเป็นทีมได้ไหม?",
            "ประวัติที่น่าสนใจ คุณมองว่าความท้าทายในการทำงานในสภาพแวดล้อมที่หลากหลายทางวัฒนธรรมเป็นอย่างไร?",
            "เล่าประสบการณ์ที่คุณต้องปรับตัวอย่างรวดเร็วกับเทคโนโลยีหรือกระบวนการใหม่",
        ],
        3: [
            "มาคุยเรื่องภาวะผู้นำกันบ้าง คุณช่วยเล่าครั้งที่คุณนำทีมผ่านพ้นอุปสรรคได้ไหม?",
            "ในสภาพแวดล้อมที่เคลื่อนไหวเร็ว คุณรักษาสมดุลระหว่างคุณภาพงานและประสิทธิภาพอย่างไร?",
            "อธิบายว่าคุณจัดการกับความไม่แน่นอนและการเปลี่ยนแปลงในโครงการอย่างไร",
        ],
        4: [
            "คุณมีความเข้าใจและแนวคิดอย่างไรเกี่ยวกับการพัฒนาของบริษัทเราในตลาดเอเชียตะวันออกเฉียงใต้?",
            "หากต้องอธิบายแนวคิดทางเทคนิคที่ซับซ้อนให้ลูกค้าฟัง คุณจะจัดการอย่างไร?",
            "อธิบายว่าเส้นทางการพัฒนาอาชีพในอุดมคติของคุณเป็นอย่างไร",
        ],
        5: [
            "ในการจัดการโครงการข้ามชาติ คุณจัดการกับความแตกต่างของเขตเวลาและวัฒนธรรมอย่างไร?",
            "คุณรักษาความไวต่อแนวโน้มอุตสาหกรรมและเรียนรู้ทักษะใหม่อย่างต่อเนื่องอย่างไร?",
            "เล่าครั้งที่คุณต้องทำงานสำคัญให้เสร็จด้วยทรัพยากรที่จำกัด",
        ],
    },
    "ms": {
        2: [
            "Bagus sekali. Bolehkah anda ceritakan projek di mana anda memainkan peranan penting dalam kerjasama pasukan?",
            "Latar belakang yang menarik. Bagaimanakah pandangan anda tentang cabaran bekerja dalam persekitaran pelbagai budaya?",
            "Ceritakan pengalaman ketika anda terpaksa menyesuaikan diri dengan pantas kepada teknologi atau proses baharu.",
        ],
        3: [
            "Mari bercakap tentang kepimpinan. Bolehkah anda ceritakan ketika anda memimpin pasukan mengatasi kesukaran?",
            "Dalam persekitaran yang bergerak pantas, bagaimana anda mengekalkan keseimbangan kualiti kerja dan kecekapan?",
            "Sila jelaskan bagaimana anda mengendalikan ketidakpastian dan perubahan dalam projek.",
        ],
        4: [
            "Apa pemahaman dan idea anda tentang perkembangan syarikat kami di pasaran Asia Tenggara?",
            "Jika diminta menerangkan konsep teknikal yang kompleks kepada pelanggan, bagaimana anda mengendalikannya?",
            "Gambarkan seperti apa laluan pembangunan kerjaya ideal menurut anda.",
        ],
        5: [
            "Dalam mengendalikan projek multinasional, bagaimana anda menguruskan perbezaan zon masa dan budaya?",
            "Bagaimana cara anda kekal peka terhadap trend industri dan terus belajar kemahiran baru?",
            "Ceritakan masa anda terpaksa menyelesaikan tugas penting dengan sumber yang terhad.",
        ],
    },
}

GENERIC_SEA_FOLLOW_UPS = {
    "en": "Can you share a specific example of how you've contributed to a cross-functional team in the Southeast Asian business environment?",
    "id": "Bisakah Anda berbagi contoh spesifik bagaimana Anda berkontribusi dalam tim lintas fungsi di lingkungan bisnis Asia Tenggara?",
    "ms": "Bolehkah anda berkongsi contoh khusus bagaimana anda menyumbang dalam pasukan lintas fungsi di persekitaran perniagaan Asia Tenggara?",
    "th": "คุณช่วยแบ่งปันตัวอย่างเฉพาะเจาะจงว่าคุณมีส่วนร่วมในทีมข้ามสายงานในสภาพแวดล้อมธุรกิจเอเชียตะวันออกเฉียงใต้อย่างไร?",
    "vi": "Bạn có thể chia sẻ một ví dụ cụ thể về cách bạn đóng góp cho một nhóm đa chức năng trong môi trường kinh doanh Đông Nam Á không?",
    "fil": "Maaari mo bang ibahagi ang isang tiyak na halimbawa kung paano ka nag-ambag sa isang cross-functional team sa Southeast Asian business environment?",
    "my": "အရှေ့တောင်အာရှစီးပွားရေးပတ်ဝန်းကျင်တွင် လုပ်ငန်းခွင်အမျိုးမျိုးရှိသော အဖွဲ့တစ်ခုတွင် သင်မည်သို့ပံ့ပိုးကူညီခဲ့သည်ကို တိကျသောဥပမာတစ်ခု မျှဝေနိုင်မလား။",
    "km": "តើអ្នកអាចចែករំលែកឧទាហរណ៍ជាក់លាក់មួយអំពីរបៀបដែលអ្នកបានរួមចំណែកដល់ក្រុមអនុវត្តការខុសៗគ្នានៅក្នុងបរិយាកាសអាជីវកម្មអាស៊ីអាគ្នេយ៍ទេ?",
    "lo": "ເຈົ້າສາມາດແບ່ງປັນຕົວຢ່າງສະເພາະກ່ຽວກັບວິທີທີ່ເຈົ້າໄດ້ປະກອບສ່ວນໃສ່ທີມງານຂ້າມໜ້າທີ່ໃນສະພາບແວດລ້ອມທຸລະກິດເອເຊຍຕາເວັນອອກສຽງໃຕ້ບໍ?",
    "zh-sg": "您能分享一个您在东南亚商业环境中为跨职能团队做出贡献的具体例子吗？",
}

FALLBACK_STAR_ASSESSMENTS = {
    "en": {
        "overallScore": 75,
        "starAnalysis": {
            "situation": {"score": 7, "feedback": "Good situational awareness demonstrated"},
            "task": {"score": 8, "feedback": "Clear understanding of task requirements"},
            "action": {"score": 7, "feedback": "Appropriate actions taken with room for improvement"},
            "result": {"score": 8, "feedback": "Positive outcomes achieved"},
        },
        "keyStrengths": ["Clear communication", "Problem-solving ability", "Cultural adaptability"],
        "areasForImprovement": ["Technical depth", "Leadership examples", "Strategic thinking"],
        "culturalFit": {"score": 8, "analysis": "Shows good understanding of Southeast Asian business culture"},
        "recommendations": "Continue developing technical skills and seek more leadership opportunities",
        "summary": "Strong candidate with good potential for growth in Southeast Asian markets",
    },
    "zh-sg": {
        "overallScore": 75,
        "starAnalysis": {
            "situation": {"score": 7, "feedback": "展现了良好的情境意识"},
            "task": {"score": 8, "feedback": "对任务要求有清晰的理解"},
            "action": {"score": 7, "feedback": "采取了适当的行动，仍有改进空间"},
            "result": {"score": 8, "feedback": "取得了积极的成果"},
        },
        "keyStrengths": ["沟通清晰", "解决问题的能力", "文化适应性"],
        "areasForImprovement": ["技术深度", "领导力实例", "战略思维"],
        "culturalFit": {"score": 8, "analysis": "对东南亚商业文化有良好的理解"},
        "recommendations": "继续发展技术技能并寻求更多领导机会",
        "summary": "在东南亚市场具有良好增长潜力的强势候选人",
    },
}

# Perform interviewer: opening, generic follow-up and closing message per language
PERFORM_FALLBACKS = {
    "en": {
        "first_question": "Hello! I'm your AI interviewer for the {job_role} position at {company}. I'll be conducting a comprehensive interview tailored specifically to this role and company. Let's begin with an introduction - please tell me about yourself and why you're interested in this position at {company}.",
        "follow_up": "That's interesting. Can you tell me more about a specific situation where you demonstrated that skill?",
        "final_message": "Thank you for this comprehensive interview! You've provided excellent insights into your experience and approach to the {job_role} role at {company}. I'm now preparing your detailed performance evaluation with personalized feedback and recommendations. This will be available shortly.",
    },
    "ms": {
        "first_question": "Selamat datang! Saya penginterview AI untuk jawatan {job_role} di {company}. Saya akan menjalankan temuduga menyeluruh yang disesuaikan khusus untuk peranan dan syarikat ini. Mari kita mulakan dengan pengenalan - sila ceritakan tentang diri anda dan mengapa anda berminat dengan jawatan ini di {company}.",
        "follow_up": "Itu menarik. Bolehkah anda ceritakan lebih lanjut tentang situasi khusus di mana anda menunjukkan kemahiran tersebut?",
        "final_message": "Terima kasih atas temuduga yang menyeluruh ini! Anda telah memberikan pandangan yang sangat baik tentang pengalaman dan pendekatan anda terhadap peranan {job_role} di {company}. Saya sedang menyediakan penilaian prestasi terperinci anda dengan maklum balas dan cadangan yang diperibadikan. Ini akan tersedia tidak lama lagi.",
    },
    "id": {
        "first_question": "Halo! Saya pewawancara AI untuk posisi {job_role} di {company}. Saya akan melakukan wawancara komprehensif yang disesuaikan khusus untuk peran dan perusahaan ini. Mari kita mulai dengan perkenalan - tolong ceritakan tentang diri Anda dan mengapa Anda tertarik dengan posisi ini di {company}.",
        "follow_up": "Itu menarik. Bisakah Anda menceritakan lebih banyak tentang situasi spesifik di mana Anda menunjukkan keterampilan tersebut?",
        "final_message": "Terima kasih atas wawancara komprehensif ini! Anda telah memberikan wawasan yang sangat baik tentang pengalaman dan pendekatan Anda terhadap peran {job_role} di {company}. Saya sekarang sedang mempersiapkan evaluasi kinerja detail Anda dengan umpan balik dan rekomendasi yang dipersonalisasi. Ini akan tersedia sebentar lagi.",
    },
    "th": {
        "first_question": "สวัสดีครับ! ผมเป็นผู้สัมภาษณ์ AI สำหรับตำแหน่ง {job_role} ที่ {company} ผมจะทำการสัมภาษณ์แบบครอบคลุมที่ปรับแต่งเฉพาะสำหรับตำแหน่งและบริษัทนี้ เริ่มต้นด้วยการแนะนำตัว - กรุณาเล่าเกี่ยวกับตัวคุณและเหตุผลที่คุณสนใจตำแหน่งนี้ที่ {company}",
        "follow_up": "น่าสนใจมาก คุณช่วยเล่าเพิ่มเติมเกี่ยวกับสถานการณ์เฉพาะที่คุณแสดงให้เห็นทักษะนั้นได้ไหม?",
        "final_message": "ขอบคุณสำหรับการสัมภาษณ์ที่ครอบคลุมนี้! คุณได้ให้ข้อมูลเชิงลึกที่ยอดเยี่ยมเกี่ยวกับประสบการณ์และแนวทางของคุณสำหรับตำแหน่ง {job_role} ที่ {company} ตอนนี้ผมกำลังเตรียมการประเมินผลการปฏิบัติงานโดยละเอียดพร้อมข้อเสนอแนะและคำแนะนำที่เป็นส่วนตัว ซึ่งจะพร้อมใช้งานในไม่ช้า",
    },
    "vi": {
        "first_question": "Xin chào! Tôi là người phỏng vấn AI cho vị trí {job_role} tại {company}. Tôi sẽ tiến hành một cuộc phỏng vấn toàn diện được thiết kế riêng cho vai trò và công ty này. Hãy bắt đầu bằng việc giới thiệu - vui lòng kể cho tôi nghe về bản thân và lý do bạn quan tâm đến vị trí này tại {company}.",
        "follow_up": "Thật thú vị. Bạn có thể kể thêm về một tình huống cụ thể mà bạn đã thể hiện kỹ năng đó không?",
        "final_message": "Cảm ơn bạn đã tham gia cuộc phỏng vấn toàn diện này! Bạn đã cung cấp những hiểu biết xuất sắc về kinh nghiệm và cách tiếp cận của mình đối với vai trò {job_role} tại {company}. Tôi đang chuẩn bị đánh giá hiệu suất chi tiết của bạn với phản hồi và khuyến nghị được cá nhân hóa. Điều này sẽ có sẵn sớm.",
    },
    "fil": {
        "first_question": "Kumusta! Ako ang inyong AI interviewer para sa posisyon ng {job_role} sa {company}. Magsasagawa ako ng komprehensibong interbyu na naka-customize para sa papel at kumpanyang ito. Magsimula tayo sa panimula - pakikwento po tungkol sa inyong sarili at bakit kayo interesado sa posisyong ito sa {company}.",
        "follow_up": "Nakakainteresa iyon. Maaari ba ninyong ikwento nang higit pa ang tungkol sa isang partikular na sitwasyon kung saan ninyo naipakita ang kasanayang iyon?",
        "final_message": "Salamat sa komprehensibong interbyu na ito! Nagbigay kayo ng napakagandang mga insight tungkol sa inyong karanasan at diskarte sa papel ng {job_role} sa {company}. Inihahanda ko na ang inyong detalyadong pagtatasa ng performance na may personalized na feedback at mga rekomendasyon. Magiging available ito maya-maya.",
    },
    "my": {
        "first_question": "မင်္ဂလာပါ! ကျွန်တော်သည် {company} ရှိ {job_role} ရာထူးအတွက် AI အင်တာဗျူးယာဖြစ်ပါသည်။ ဤအခန်းကဏ္ဍနှင့် ကုမ္ပဏီအတွက် အထူးပြုလုပ်ထားသော ပြည့်စုံသော အင်တာဗျူးကို လုပ်ဆောင်မည်ဖြစ်ပါသည်။ မိတ်ဆက်ခြင်းဖြင့် စတင်ကြပါစို့ - သင့်အကြောင်းနှင့် {company} တွင် ဤရာထူးကို အဘယ်ကြောင့် စိတ်ဝင်စားသည်ကို ပြောပြပါ။",
        "follow_up": "စိတ်ဝင်စားဖွယ်ပါပဲ။ သင်သည် ထိုကျွမ်းကျင်မှုကို ပြသခဲ့သည့် တိကျသော အခြေအနေတစ်ခုအကြောင်း နောက်ထပ် ပြောပြနိုင်မလား?",
        "final_message": "ဤပြည့်စုံသော အင်တာဗျူးအတွက် ကျေးဇူးတင်ပါသည်! သင်သည် {company} ရှိ {job_role} အခန်းကဏ္ဍအတွက် သင့်အတွေ့အကြုံနှင့် ချဉ်းကပ်မှုအကြောင်း အလွန်ကောင်းမွန်သော ထိုးထွင်းမြင်ကွင်းများ ပေးခဲ့ပါသည်။ ယခုအခါ သင့်အတွက် အသေးစိတ် စွမ်းဆောင်ရည် အကဲဖြတ်ချက်ကို ပြင်ဆင်နေပါသည်။",
    },
    "km": {
        "first_question": "ជំរាបសួរ! ខ្ញុំជាអ្នកសម្ភាសន៍ AI សម្រាប់មុខតំណែង {job_role} នៅ {company}។ ខ្ញុំនឹងធ្វើការសម្ភាសន៍ពេញលេញដែលត្រូវបានរៀបចំជាពិសេសសម្រាប់តួនាទីនិងក្រុមហ៊ុននេះ។ សូមចាប់ផ្តើមជាមួយការណែនាំ - សូមប្រាប់ខ្ញុំអំពីខ្លួនអ្នកនិងហេតុផលដែលអ្នកចាប់អារម្មណ៍នឹងមុខតំណែងនេះនៅ {company}។",
        "follow_up": "វាគួរឱ្យចាប់អារម្មណ៍។ តើអ្នកអាចប្រាប់ខ្ញុំបន្ថែមអំពីស្ថានភាពជាក់លាក់មួយដែលអ្នកបានបង្ហាញជំនាញនោះបានទេ?",
        "final_message": "អរគុណសម្រាប់ការសម្ភាសន៍ពេញលេញនេះ! អ្នកបានផ្តល់នូវយោបល់ដ៏ល្អអំពីបទពិសោធន៍និងវិធីសាស្រ្តរបស់អ្នកចំពោះតួនាទី {job_role} នៅ {company}។ ខ្ញុំកំពុងរៀបចំការវាយតម្លៃដំណើរការលម្អិតរបស់អ្នក។",
    },
    "lo": {
        "first_question": "ສະບາຍດີ! ຂ້ອຍແມ່ນນັກສຳພາດ AI ສຳລັບຕຳແໜ່ງ {job_role} ທີ່ {company}. ຂ້ອຍຈະເຮັດການສຳພາດທີ່ຄົບຖ້ວນທີ່ຖືກອອກແບບສະເພາະສຳລັບບົດບາດ ແລະ ບໍລິສັດນີ້. ມາເລີ່ມຕົ້ນດ້ວຍການແນະນຳ - ກະລຸນາບອກຂ້ອຍກ່ຽວກັບຕົວເຈົ້າ ແລະ ເຫດຜົນທີ່ເຈົ້າສົນໃຈໃນຕຳແໜ່ງນີ້ທີ່ {company}.",
        "follow_up": "ນັ້ນໜ້າສົນໃຈ. ເຈົ້າສາມາດບອກຂ້ອຍເພີ່ມເຕີມກ່ຽວກັບສະຖານະການສະເພາະທີ່ເຈົ້າສະແດງໃຫ້ເຫັນທັກສະນັ້ນໄດ້ບໍ?",
        "final_message": "ຂໍຂອບໃຈສຳລັບການສຳພາດທີ່ຄົບຖ້ວນນີ້! ເຈົ້າໄດ້ໃຫ້ຄວາມເຂົ້າໃຈທີ່ດີເລີດກ່ຽວກັບປະສົບການ ແລະ ວິທີການເຂົ້າຫາຂອງເຈົ້າຕໍ່ບົດບາດ {job_role} ທີ່ {company}. ຂ້ອຍກຳລັງກະກຽມການປະເມີນຜົນປະສິດທິພາບລະອຽດຂອງເຈົ້າ.",
    },
    "zh-sg": {
        "first_question": "您好！我是您的AI面试官，负责{company}的{job_role}职位面试。我将针对此职位和公司进行全面的定制化面试。让我们从自我介绍开始 - 请告诉我您的情况以及您为什么对{company}的这个职位感兴趣。",
        "follow_up": "很有趣。您能详细描述一个您展示了该技能的具体情况吗？",
        "final_message": "感谢您参加这次全面的面试！您对{company}{job_role}职位的经验和方法提供了出色的见解。我正在准备您的详细绩效评估，包括个性化反馈和建议。这将很快提供给您。",
    },
}
