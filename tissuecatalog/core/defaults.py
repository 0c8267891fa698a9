# -*- coding: utf-8 -*-
"""The clinical default palette used to populate a fresh catalog.

Each entry is (name, (r, g, b)). Ids follow list order starting at 1.
"""

DEFAULT_TISSUES = [
    ("Adrenal_gland", (0.338000, 0.961000, 0.725000)),
    ("Air_internal", (0.000000, 0.000000, 0.000000)),
    ("Artery", (0.800000, 0.000000, 0.000000)),
    ("Bladder", (0.529400, 0.854900, 0.011800)),
    ("Blood_vessel", (0.666700, 0.003900, 0.003900)),
    ("Bone", (0.929412, 0.839216, 0.584314)),
    ("Brain_grey_matter", (0.500000, 0.500000, 0.500000)),
    ("Brain_white_matter", (0.900000, 0.900000, 0.900000)),
    ("Breast", (0.996000, 0.741000, 1.000000)),
    ("Bronchi", (0.528000, 0.592000, 1.000000)),
    ("Bronchi_lumen", (0.368600, 0.474500, 0.635300)),
    ("Cartilage", (0.627000, 0.988000, 0.969000)),
    ("Cerebellum", (0.648000, 0.599000, 0.838000)),
    ("Cerebrospinal_fluid", (0.474500, 0.521600, 0.854900)),
    ("Connective_tissue", (1.000000, 0.705882, 0.000000)),
    ("Diaphragm", (0.745000, 0.188000, 0.286000)),
    ("Ear_cartilage", (0.627000, 0.988000, 0.969000)),
    ("Ear_skin", (0.423500, 0.611800, 0.603900)),
    ("Epididymis", (0.000000, 0.359000, 1.000000)),
    ("Esophagus", (1.000000, 0.585000, 0.000000)),
    ("Esophagus_lumen", (1.000000, 0.789000, 0.635000)),
    ("Eye_lens", (0.007800, 0.658800, 0.996100)),
    ("Eye_vitreous_humor", (0.331000, 0.746000, 0.937000)),
    ("Fat", (0.984314, 0.980392, 0.215686)),
    ("Gallbladder", (0.258800, 0.972500, 0.274500)),
    ("Heart_lumen", (1.000000, 0.000000, 0.000000)),
    ("Heart_muscle", (1.000000, 0.000000, 0.239000)),
    ("Hippocampus", (0.915000, 0.188000, 1.000000)),
    ("Hypophysis", (1.000000, 0.000000, 0.796000)),
    ("Hypothalamus", (0.563000, 0.239000, 0.754000)),
    ("Intervertebral_disc", (0.627500, 0.988200, 0.968600)),
    ("Kidney_cortex", (0.000000, 0.754000, 0.200000)),
    ("Kidney_medulla", (0.507000, 1.000000, 0.479000)),
    ("Large_intestine", (1.000000, 0.303000, 0.176000)),
    ("Large_intestine_lumen", (0.817000, 0.556000, 0.570000)),
    ("Larynx", (0.937000, 0.561000, 0.950000)),
    ("Liver", (0.478400, 0.262700, 0.141200)),
    ("Lung", (0.225000, 0.676000, 1.000000)),
    ("Mandible", (0.929412, 0.839216, 0.584314)),
    ("Marrow_red", (0.937300, 0.639200, 0.498000)),
    ("Marrow_white", (0.921600, 0.788200, 0.486300)),
    ("Meniscus", (0.577000, 0.338000, 0.754000)),
    ("Midbrain", (0.490200, 0.682400, 0.509800)),
    ("Muscle", (0.745098, 0.188235, 0.286275)),
    ("Nail", (0.873000, 0.887000, 0.880000)),
    ("Mucosa", (1.000000, 0.631373, 0.745098)),
    ("Nerve", (0.000000, 0.754000, 0.479000)),
    ("Ovary", (0.718000, 0.000000, 1.000000)),
    ("Pancreas", (0.506000, 0.259000, 0.808000)),
    ("Patella", (0.929412, 0.839216, 0.584314)),
    ("Penis", (0.000000, 0.000000, 1.000000)),
    ("Pharynx", (0.368600, 0.474500, 0.635300)),
    ("Prostate", (0.190000, 0.190000, 1.000000)),
    ("Scrotum", (0.366000, 0.549000, 1.000000)),
    ("Skin", (0.746000, 0.613000, 0.472000)),
    ("Skull", (0.929412, 0.839216, 0.584314)),
    ("Small_intestine", (1.000000, 0.775000, 0.690000)),
    ("Small_intestine_lumen", (1.000000, 0.474500, 0.635300)),
    ("Spinal_cord", (0.000000, 0.732000, 0.662000)),
    ("Spleen", (0.682400, 0.964700, 0.788200)),
    ("Stomach", (1.000000, 0.500000, 0.000000)),
    ("Stomach_lumen", (1.000000, 0.738000, 0.503000)),
    ("SAT", (1.000000, 0.796079, 0.341176)),
    ("Teeth", (0.976471, 0.960784, 0.905882)),
    ("Tendon_Ligament", (0.945098, 0.960784, 0.972549)),
    ("Testis", (0.000000, 0.606000, 1.000000)),
    ("Thalamus", (0.000000, 0.415000, 0.549000)),
    ("Thymus", (0.439200, 0.733300, 0.549000)),
    ("Thyroid_gland", (0.321600, 0.023500, 0.298000)),
    ("Tongue", (0.800000, 0.400000, 0.400000)),
    ("Trachea", (0.183000, 1.000000, 1.000000)),
    ("Trachea_lumen", (0.613000, 1.000000, 1.000000)),
    ("Ureter_Urethra", (0.376500, 0.607800, 0.007800)),
    ("Uterus", (0.894000, 0.529000, 1.000000)),
    ("Vagina", (0.608000, 0.529000, 1.000000)),
    ("Vein", (0.000000, 0.329000, 1.000000)),
    ("Vertebrae", (0.929412, 0.839216, 0.584314)),
    ("Pinealbody", (1.000000, 0.000000, 0.000000)),
    ("Pons", (0.000000, 0.710000, 0.700000)),
    ("Medulla_oblongata", (0.370000, 0.670000, 0.920000)),
    ("Cornea", (0.686275, 0.000000, 1.000000)),
    ("Eye_Sclera", (1.000000, 0.000000, 0.780392)),
]
